"""Gemini generateContent client."""

import asyncio
import base64
from pathlib import Path
from typing import Iterable

from curl_cffi.requests import AsyncSession
from curl_cffi.requests.exceptions import RequestException, Timeout
from loguru import logger
from pydantic import ValidationError

from ..config import Settings, settings as default_settings
from ..errors import (
    ConfigurationError,
    ImageReadError,
    MissingContentError,
    ModalityNotSupportedError,
    ResponseDecodeError,
    TransportError,
)
from ..models.catalog import GoogleModel, ModalityConfig, resolve_model
from ..models.common import (
    Content,
    FunctionCall,
    FunctionResponse,
    HarmCategory,
    InlineData,
    Modality,
    Part,
)
from ..models.request import (
    GenerateContentRequest,
    GenerationConfig,
    SafetySetting,
    Tool,
    ToolConfig,
)
from ..models.response import ErrorResponse, GenerateContentResponse, UsageMetadata
from .session import get_session


IMAGE_MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".heic": "image/heic",
    ".heif": "image/heif",
}


def guess_image_mime_type(path: Path) -> str:
    """Map an image file suffix to its MIME type."""
    suffix = path.suffix.lower()
    try:
        return IMAGE_MIME_TYPES[suffix]
    except KeyError:
        raise ValueError(f"Unsupported image type: {suffix or path.name}") from None


class Response:
    """
    A decoded generateContent response.

    The extraction helpers only read from the underlying payload; calling
    them repeatedly returns the same result.
    """

    def __init__(self, raw: GenerateContentResponse):
        self.raw = raw

    def _parts(self) -> Iterable[Part]:
        for candidate in self.raw.candidates:
            yield from candidate.content.parts

    def extract_text(self) -> str | None:
        """
        Join the text parts of every candidate.

        Returns None when the response has no text part at all, so an
        image-only answer is distinguishable from an empty string.
        Thought summaries are skipped.
        """
        texts = [part.text for part in self._parts() if part.text is not None and not part.thought]
        if not texts:
            return None
        return "".join(texts)

    def require_text(self) -> str:
        """Like :meth:`extract_text` but raise if there is no text."""
        text = self.extract_text()
        if text is None:
            raise MissingContentError("Response does not contain any text")
        return text

    def extract_images(self) -> list[InlineData]:
        """Return every inline image part, in response order."""
        return self._inline_data("image/")

    def extract_audio(self) -> list[InlineData]:
        """Return every inline audio part, in response order."""
        return self._inline_data("audio/")

    def extract_function_calls(self) -> list[FunctionCall]:
        """Return every function call the model asked for, in response order."""
        return [part.functionCall for part in self._parts() if part.functionCall is not None]

    def _inline_data(self, mime_prefix: str) -> list[InlineData]:
        return [
            part.inlineData
            for part in self._parts()
            if part.inlineData is not None and part.inlineData.mimeType.startswith(mime_prefix)
        ]

    @property
    def usage(self) -> UsageMetadata:
        return self.raw.usageMetadata

    @property
    def finish_reasons(self) -> list[str | None]:
        return [candidate.finishReason for candidate in self.raw.candidates]

    @property
    def model_version(self) -> str | None:
        return self.raw.modelVersion

    @property
    def block_reason(self) -> str | None:
        if self.raw.promptFeedback is None:
            return None
        return self.raw.promptFeedback.blockReason

    def __repr__(self) -> str:
        return (
            f"Response(candidates={len(self.raw.candidates)}, "
            f"model_version={self.raw.modelVersion!r})"
        )


class Client:
    """
    Client for a single Gemini model.

    Configuration methods (``with_*``) mutate the client and return it so
    they can be chained.  Each ``send_*`` call performs exactly one HTTP
    request.  Unless history is enabled, calls are independent of each other.

    Example:
        >>> client = Client("gemini-2.5-flash", api_key).with_defaults()
        >>> response = await client.send_text("Hello")
        >>> print(response.extract_text())
    """

    def __init__(
        self,
        model: GoogleModel | str,
        api_key: str,
        *,
        settings: Settings | None = None,
        session: AsyncSession | None = None,
    ):
        if not api_key or not api_key.strip():
            raise ConfigurationError("API key must not be empty")

        self.model = resolve_model(model)
        self.settings = settings or default_settings
        self.modalities: ModalityConfig = self.model.default_modalities
        self.request = GenerateContentRequest(contents=[])

        self._api_key = api_key
        self._session = session
        self._keep_history = False
        self._preamble: list[Content] = []
        self._history: list[Content] = []

        logger.info(f"Gemini client created for model {self.model}")

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        session: AsyncSession | None = None,
    ) -> "Client":
        """Create a client from ``GEMINI_API_KEY`` and ``GEMINI_MODEL``."""
        settings = settings or default_settings
        if not settings.gemini_api_key:
            raise ConfigurationError("GEMINI_API_KEY is not set")
        return cls(
            settings.gemini_model,
            settings.gemini_api_key,
            settings=settings,
            session=session,
        )

    @property
    def url(self) -> str:
        return (
            f"{self.settings.base_api}/{self.settings.api_version}"
            f"/models/{self.model.name}:generateContent"
        )

    # Configuration

    def with_defaults(self) -> "Client":
        """Apply the model's default modalities and a safety setting per category."""
        self.modalities = self.model.default_modalities
        self.request.safetySettings = [SafetySetting(category=category) for category in HarmCategory]
        self.request.generationConfig = GenerationConfig(
            responseModalities=self.modalities.response_modalities()
        )
        return self

    def with_options(self, options: GenerationConfig) -> "Client":
        """
        Replace the generation config.

        Response modalities in ``options`` override the active ones and must
        be supported by the model.  When they are left empty, the active
        modalities are filled in.
        """
        options = options.model_copy(deep=True)
        if options.responseModalities:
            requested = ModalityConfig(
                inputs=self.modalities.inputs,
                outputs=options.responseModalities,
            )
            requested.ensure_within(self.model.default_modalities, self.model.name)
            self.modalities = requested
        else:
            options.responseModalities = self.modalities.response_modalities()
        self.request.generationConfig = options
        return self

    def with_modalities(self, modalities: ModalityConfig) -> "Client":
        """Restrict the modalities used by this client."""
        modalities.ensure_within(self.model.default_modalities, self.model.name)
        self.modalities = modalities
        config = self.request.generationConfig or GenerationConfig()
        self.request.generationConfig = config.model_copy(
            update={"responseModalities": modalities.response_modalities()}
        )
        return self

    def with_safety(self, safety_settings: Iterable[SafetySetting]) -> "Client":
        self.request.safetySettings = list(safety_settings)
        return self

    def with_instructions(self, instructions: str) -> "Client":
        """
        Set the system instruction.

        Models without system instruction support get the instruction as a
        leading user turn instead.
        """
        instruction = Content(role="user", parts=[Part(text=instructions)])
        if self.model.supports_system_instruction:
            self.request.systemInstruction = instruction
        else:
            self._preamble = [instruction]
        return self

    def with_tools(self, tools: Iterable[Tool], tool_config: ToolConfig | None = None) -> "Client":
        self.request.tools = list(tools) or None
        self.request.toolConfig = tool_config
        return self

    def with_history(self, enabled: bool = True) -> "Client":
        """Send earlier turns along with each request; disabling clears them."""
        self._keep_history = enabled
        if not enabled:
            self._history = []
        return self

    def history(self) -> list[Content]:
        """Return the contents that precede the next user turn."""
        return [*self._preamble, *self._history]

    # Requests

    def build_request(self, parts: Iterable[Part]) -> GenerateContentRequest:
        """Build the request for a new user turn without sending it."""
        turn = Content(role="user", parts=list(parts))
        return self.request.model_copy(
            update={"contents": [*self._preamble, *self._history, turn]},
            deep=True,
        )

    async def send_text(self, text: str) -> Response:
        """Send a text prompt."""
        self._require_input(Modality.TEXT)
        return await self.send_parts([Part(text=text)])

    async def send_image_bytes(self, text: str | None, mime_type: str, data: str) -> Response:
        """
        Send a base64 encoded image, optionally preceded by text.

        Args:
            text: Optional text sent in the same turn
            mime_type: MIME type of the image, e.g. ``image/png``
            data: Base64 encoded image bytes

        Returns:
            The decoded response

        Raises:
            ModalityNotSupportedError: the model does not accept images
            TransportError: the request failed
            ResponseDecodeError: the response could not be decoded
        """
        self._require_input(Modality.IMAGE)
        parts = []
        if text is not None:
            self._require_input(Modality.TEXT)
            parts.append(Part(text=text))
        parts.append(Part(inlineData=InlineData(mimeType=mime_type, data=data)))
        return await self.send_parts(parts)

    async def send_image(self, text: str | None, path: str | Path) -> Response:
        """
        Read an image file and send it with optional text.

        Raises:
            ValueError: the file suffix is not a known image type
            ImageReadError: the file could not be read
        """
        path = Path(path)
        mime_type = guess_image_mime_type(path)
        try:
            raw = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            logger.error(f"Cannot read image {path}: {e}")
            raise ImageReadError(f"Cannot read image {path}: {e}") from e
        data = base64.b64encode(raw).decode("ascii")
        return await self.send_image_bytes(text, mime_type, data)

    async def send_function_response(
        self,
        name: str,
        response: dict,
        id: str | None = None,
    ) -> Response:
        """
        Answer a function call from the model.

        Pass the ``id`` of the :class:`FunctionCall` when the model set one.
        The call itself must already be part of the conversation, so history
        is normally enabled when using tools.
        """
        part = Part(functionResponse=FunctionResponse(id=id, name=name, response=response))
        return await self.send_parts([part])

    def _require_input(self, modality: Modality) -> None:
        if not self.modalities.accepts(modality):
            raise ModalityNotSupportedError(self.model.name, "input", [modality])

    async def send_parts(self, parts: Iterable[Part]) -> Response:
        """Send arbitrary parts as one user turn."""
        request = self.build_request(parts)
        raw = await self._post(request)

        if self._keep_history:
            self._history.append(request.contents[-1])
            for candidate in raw.candidates:
                if candidate.content.parts:
                    self._history.append(candidate.content.model_copy(update={"role": "model"}))

        return Response(raw)

    async def _post(self, request: GenerateContentRequest) -> GenerateContentResponse:
        session = self._session or await get_session()

        logger.info(
            f"Sending request to {self.model} ({len(request.contents[-1].parts)} parts)"
        )
        logger.debug(f"POST {self.url}")

        try:
            response = await session.post(
                self.url,
                headers={
                    "Content-Type": "application/json",
                    "x-goog-api-key": self._api_key,
                },
                json=request.to_payload(),
                timeout=self.settings.timeout,
                proxy=self.settings.proxy,
            )
        except Timeout as e:
            logger.error(f"Request timeout: {e}")
            raise TransportError(f"Request timeout: {e}") from e
        except RequestException as e:
            logger.error(f"Request failed: {e}")
            raise TransportError(f"Request failed: {e}") from e
        except RuntimeError as e:
            # e.g. a session bound to another event loop
            logger.error(f"Request failed: {e}")
            raise TransportError(f"Request failed: {e}") from e

        logger.debug(f"Response status: {response.status_code}")

        if not 200 <= response.status_code < 300:
            raise self._http_error(response)

        try:
            result = GenerateContentResponse.model_validate(response.json())
        except ValidationError as e:
            logger.error(f"Unexpected response schema: {e}")
            raise ResponseDecodeError(f"Unexpected response schema: {e}") from e
        except ValueError as e:
            logger.error(
                f"JSON decode error: {e}, response text: "
                f"{response.text[:500] if response.text else 'empty'}"
            )
            raise ResponseDecodeError("Invalid JSON response") from e

        if result.promptFeedback is not None and result.promptFeedback.blockReason:
            logger.warning(f"Prompt blocked: {result.promptFeedback.blockReason}")

        return result

    @staticmethod
    def _http_error(response) -> TransportError:
        try:
            detail = ErrorResponse.model_validate(response.json()).error
        except ValueError:
            logger.error(
                f"API request failed - status: {response.status_code}, "
                f"response: {response.text[:1024] if response.text else 'empty'}"
            )
            return TransportError(
                f"API request failed: status {response.status_code}",
                status_code=response.status_code,
            )

        logger.error(
            f"API error - code: {detail.code}, status: {detail.status}, message: {detail.message}"
        )
        return TransportError(detail.message, status_code=response.status_code, status=detail.status)
