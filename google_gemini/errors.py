"""Exceptions raised by the client library."""


class GeminiError(Exception):
    """Base class for all client errors."""


class ModelNotFoundError(GeminiError, ValueError):
    """The model name does not match any supported variant."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No such model: {name}")


class ConfigurationError(GeminiError, ValueError):
    """The client was given an unusable configuration."""


class ModalityNotSupportedError(GeminiError):
    """A modality was requested that the model cannot handle."""

    def __init__(self, model: str, direction: str, modalities):
        self.model = model
        self.direction = direction
        self.modalities = sorted(m.value for m in modalities)
        super().__init__(
            f"Model {model} does not support {direction} modalities: "
            f"{', '.join(self.modalities)}"
        )


class TransportError(GeminiError):
    """The request failed at the network or HTTP level."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        status: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.status = status
        super().__init__(message)


class ResponseDecodeError(GeminiError):
    """The response body does not match the expected schema."""


class MissingContentError(GeminiError):
    """The response does not contain the expected content."""


class ImageReadError(GeminiError, OSError):
    """An image file could not be read."""
