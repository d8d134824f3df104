"""Async client for the Google Gemini generateContent API."""

__version__ = "0.1.0"

from .config import Settings, settings
from .errors import (
    ConfigurationError,
    GeminiError,
    ImageReadError,
    MissingContentError,
    ModalityNotSupportedError,
    ModelNotFoundError,
    ResponseDecodeError,
    TransportError,
)
from .models import GoogleModel, Modality, ModalityConfig, ModelVariant, resolve_model
from .services import Client, Response, close_session, get_session

__all__ = [
    "__version__",
    "Settings",
    "settings",
    "GeminiError",
    "ConfigurationError",
    "ImageReadError",
    "MissingContentError",
    "ModalityNotSupportedError",
    "ModelNotFoundError",
    "ResponseDecodeError",
    "TransportError",
    "GoogleModel",
    "Modality",
    "ModalityConfig",
    "ModelVariant",
    "resolve_model",
    "Client",
    "Response",
    "close_session",
    "get_session",
]
