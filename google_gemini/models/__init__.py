"""Data models for the client library."""

from .catalog import GoogleModel, ModalityConfig, ModelVariant, resolve_model
from .common import Content, HarmCategory, InlineData, Modality, Part
from .request import (
    GenerateContentRequest,
    GenerationConfig,
    HarmBlockThreshold,
    SafetySetting,
    SpeechConfig,
    Tool,
    ToolConfig,
)
from .response import GenerateContentResponse, Candidate, UsageMetadata, ErrorResponse, ErrorDetail

__all__ = [
    "GoogleModel",
    "ModalityConfig",
    "ModelVariant",
    "resolve_model",
    "Content",
    "HarmCategory",
    "InlineData",
    "Modality",
    "Part",
    "GenerateContentRequest",
    "GenerationConfig",
    "HarmBlockThreshold",
    "SafetySetting",
    "SpeechConfig",
    "Tool",
    "ToolConfig",
    "GenerateContentResponse",
    "Candidate",
    "UsageMetadata",
    "ErrorResponse",
    "ErrorDetail",
]
