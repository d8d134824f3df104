"""Supported Gemini models and the modalities they accept and produce.

Model names are resolved against a fixed vocabulary of base variants.  Dated
or preview releases are addressed by appending a ``preview`` suffix to a base
name (``gemini-2.5-flash-preview-05-20``); such names resolve to the base
variant and keep the suffix so the full name can be sent back to the API.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ..errors import ModalityNotSupportedError, ModelNotFoundError
from .common import Modality


PREVIEW_MARKER = "preview"
RESOURCE_PREFIX = "models/"


class ModelVariant(str, Enum):
    """Base model families known to the client."""

    GEMINI_2_0_FLASH = "gemini-2.0-flash"
    GEMINI_2_0_FLASH_LITE = "gemini-2.0-flash-lite"
    GEMINI_2_0_FLASH_EXP_IMAGE_GENERATION = "gemini-2.0-flash-exp-image-generation"
    GEMINI_2_5_FLASH = "gemini-2.5-flash"
    GEMINI_2_5_FLASH_LITE = "gemini-2.5-flash-lite"
    GEMINI_2_5_PRO = "gemini-2.5-pro"
    GEMINI_2_5_FLASH_PREVIEW_TTS = "gemini-2.5-flash-preview-tts"
    GEMINI_2_5_PRO_PREVIEW_TTS = "gemini-2.5-pro-preview-tts"

    @property
    def default_modalities(self) -> "ModalityConfig":
        return _DEFAULT_MODALITIES[self]


class ModalityConfig(BaseModel):
    """Input and output modalities allowed for a model."""

    inputs: frozenset[Modality] = Field(..., description="Accepted input modalities")
    outputs: frozenset[Modality] = Field(..., description="Produced output modalities")

    model_config = {"frozen": True}

    def accepts(self, modality: Modality) -> bool:
        return modality in self.inputs

    def produces(self, modality: Modality) -> bool:
        return modality in self.outputs

    def response_modalities(self) -> list[Modality]:
        """Output modalities in a stable order, as sent in ``responseModalities``."""
        return [m for m in Modality if m in self.outputs]

    def ensure_within(self, supported: "ModalityConfig", model: str) -> None:
        """Raise if this config asks for anything ``supported`` does not allow."""
        extra_inputs = self.inputs - supported.inputs
        if extra_inputs:
            raise ModalityNotSupportedError(model, "input", extra_inputs)
        extra_outputs = self.outputs - supported.outputs
        if extra_outputs:
            raise ModalityNotSupportedError(model, "output", extra_outputs)


_TEXT_MODEL = ModalityConfig(
    inputs=[Modality.TEXT, Modality.IMAGE],
    outputs=[Modality.TEXT],
)
_IMAGE_GENERATION_MODEL = ModalityConfig(
    inputs=[Modality.TEXT, Modality.IMAGE],
    outputs=[Modality.TEXT, Modality.IMAGE],
)
_SPEECH_MODEL = ModalityConfig(
    inputs=[Modality.TEXT],
    outputs=[Modality.AUDIO],
)

_DEFAULT_MODALITIES: dict[ModelVariant, ModalityConfig] = {
    ModelVariant.GEMINI_2_0_FLASH: _TEXT_MODEL,
    ModelVariant.GEMINI_2_0_FLASH_LITE: _TEXT_MODEL,
    ModelVariant.GEMINI_2_0_FLASH_EXP_IMAGE_GENERATION: _IMAGE_GENERATION_MODEL,
    ModelVariant.GEMINI_2_5_FLASH: _TEXT_MODEL,
    ModelVariant.GEMINI_2_5_FLASH_LITE: _TEXT_MODEL,
    ModelVariant.GEMINI_2_5_PRO: _TEXT_MODEL,
    ModelVariant.GEMINI_2_5_FLASH_PREVIEW_TTS: _SPEECH_MODEL,
    ModelVariant.GEMINI_2_5_PRO_PREVIEW_TTS: _SPEECH_MODEL,
}

# The experimental image model rejects systemInstruction
_NO_SYSTEM_INSTRUCTION = frozenset({ModelVariant.GEMINI_2_0_FLASH_EXP_IMAGE_GENERATION})

# Longest names first so "gemini-2.5-flash-lite" wins over "gemini-2.5-flash"
_BY_LONGEST_NAME = sorted(ModelVariant, key=lambda v: len(v.value), reverse=True)


def _is_preview_suffix(suffix: str) -> bool:
    return suffix == PREVIEW_MARKER or suffix.startswith(PREVIEW_MARKER + "-")


class GoogleModel(BaseModel):
    """A resolved model: base variant plus optional preview suffix."""

    variant: ModelVariant = Field(..., description="Base model family")
    suffix: str | None = Field(default=None, description="Preview suffix, e.g. 'preview-06-17'")

    model_config = {"frozen": True}

    @field_validator("suffix")
    @classmethod
    def _check_suffix(cls, value: str | None) -> str | None:
        if value is not None and not _is_preview_suffix(value):
            raise ValueError(f"suffix must start with '{PREVIEW_MARKER}': {value!r}")
        return value

    @classmethod
    def parse(cls, name: str) -> "GoogleModel":
        """
        Resolve a model name.

        Accepts bare names (``gemini-2.5-pro``) and resource names
        (``models/gemini-2.5-pro``).  The longest base name that prefixes
        ``name`` decides the variant; whatever follows it must be a preview
        suffix.

        Raises:
            ModelNotFoundError: ``name`` does not resolve to a known variant
        """
        candidate = name.strip()
        if candidate.startswith(RESOURCE_PREFIX):
            candidate = candidate[len(RESOURCE_PREFIX):]

        for variant in _BY_LONGEST_NAME:
            base = variant.value
            if candidate == base:
                return cls(variant=variant)
            if candidate.startswith(base + "-"):
                suffix = candidate[len(base) + 1:]
                if _is_preview_suffix(suffix):
                    return cls(variant=variant, suffix=suffix)
                break

        raise ModelNotFoundError(name)

    @classmethod
    def supported_names(cls) -> list[str]:
        return [variant.value for variant in ModelVariant]

    @property
    def name(self) -> str:
        if self.suffix:
            return f"{self.variant.value}-{self.suffix}"
        return self.variant.value

    @property
    def default_modalities(self) -> ModalityConfig:
        return self.variant.default_modalities

    @property
    def supports_system_instruction(self) -> bool:
        return self.variant not in _NO_SYSTEM_INSTRUCTION

    def __str__(self) -> str:
        return self.name


def resolve_model(name: "str | GoogleModel") -> GoogleModel:
    """Resolve ``name`` to a :class:`GoogleModel`, passing resolved models through."""
    if isinstance(name, GoogleModel):
        return name
    return GoogleModel.parse(name)
