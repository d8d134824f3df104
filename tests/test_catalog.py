"""Tests for model name resolution and default modalities."""

import pytest
from pydantic import ValidationError

from google_gemini.errors import ModalityNotSupportedError, ModelNotFoundError
from google_gemini.models.catalog import (
    GoogleModel,
    ModalityConfig,
    ModelVariant,
    resolve_model,
)
from google_gemini.models.common import Modality


@pytest.mark.parametrize("variant", list(ModelVariant))
def test_every_supported_name_resolves(variant: ModelVariant) -> None:
    model = GoogleModel.parse(variant.value)
    assert model.variant is variant
    assert model.suffix is None
    assert model.name == variant.value


@pytest.mark.parametrize(
    "name",
    [
        "",
        "gpt-4o",
        "gemini",
        "gemini-2.5",
        "gemini-2.0-flash-exp",
        "gemini-2.5-flash-001",
        "gemini-2.5-pro-latest",
        "gemini-2.5-pro-previewer",
        "GEMINI-2.5-PRO",
        "xgemini-2.5-pro",
    ],
)
def test_unknown_names_fail(name: str) -> None:
    with pytest.raises(ModelNotFoundError) as exc_info:
        GoogleModel.parse(name)
    assert exc_info.value.name == name
    assert str(exc_info.value) == f"No such model: {name}"


def test_model_not_found_is_value_error() -> None:
    with pytest.raises(ValueError):
        GoogleModel.parse("claude")


@pytest.mark.parametrize(
    "name, variant, suffix",
    [
        ("gemini-2.5-pro-preview", ModelVariant.GEMINI_2_5_PRO, "preview"),
        ("gemini-2.5-pro-preview-06-05", ModelVariant.GEMINI_2_5_PRO, "preview-06-05"),
        ("gemini-2.5-flash-preview-05-20", ModelVariant.GEMINI_2_5_FLASH, "preview-05-20"),
        (
            "gemini-2.5-flash-lite-preview-06-17",
            ModelVariant.GEMINI_2_5_FLASH_LITE,
            "preview-06-17",
        ),
        (
            "gemini-2.0-flash-exp-image-generation-preview-06-17",
            ModelVariant.GEMINI_2_0_FLASH_EXP_IMAGE_GENERATION,
            "preview-06-17",
        ),
        (
            "gemini-2.5-flash-preview-tts-preview-1",
            ModelVariant.GEMINI_2_5_FLASH_PREVIEW_TTS,
            "preview-1",
        ),
    ],
)
def test_preview_suffix_is_retained(name: str, variant: ModelVariant, suffix: str) -> None:
    model = GoogleModel.parse(name)
    assert model.variant is variant
    assert model.suffix == suffix
    assert model.name == name
    assert str(model) == name


def test_longest_name_wins() -> None:
    assert GoogleModel.parse("gemini-2.5-flash-lite").variant is ModelVariant.GEMINI_2_5_FLASH_LITE
    assert (
        GoogleModel.parse("gemini-2.5-flash-preview-tts").variant
        is ModelVariant.GEMINI_2_5_FLASH_PREVIEW_TTS
    )


def test_resource_prefix_and_whitespace_are_ignored() -> None:
    model = GoogleModel.parse("  models/gemini-2.5-pro\n")
    assert model.variant is ModelVariant.GEMINI_2_5_PRO
    assert model.name == "gemini-2.5-pro"


def test_resolve_model_passes_models_through() -> None:
    model = GoogleModel.parse("gemini-2.0-flash")
    assert resolve_model(model) is model
    assert resolve_model("gemini-2.0-flash") == model


def test_direct_construction_rejects_non_preview_suffix() -> None:
    with pytest.raises(ValidationError):
        GoogleModel(variant=ModelVariant.GEMINI_2_5_PRO, suffix="latest")


def test_supported_names_lists_vocabulary() -> None:
    names = GoogleModel.supported_names()
    assert "gemini-2.5-pro" in names
    assert "gemini-2.0-flash-exp-image-generation" in names
    assert len(names) == len(ModelVariant)


def test_pro_defaults_to_text_only_output() -> None:
    model = GoogleModel.parse("gemini-2.5-pro")
    assert model.variant is ModelVariant.GEMINI_2_5_PRO
    assert model.default_modalities.outputs == frozenset({Modality.TEXT})
    assert model.default_modalities.response_modalities() == [Modality.TEXT]


def test_image_generation_defaults_to_text_and_image_output() -> None:
    model = GoogleModel.parse("gemini-2.0-flash-exp-image-generation")
    assert model.variant is ModelVariant.GEMINI_2_0_FLASH_EXP_IMAGE_GENERATION
    assert model.default_modalities.response_modalities() == [Modality.TEXT, Modality.IMAGE]


@pytest.mark.parametrize(
    "variant",
    [
        ModelVariant.GEMINI_2_0_FLASH,
        ModelVariant.GEMINI_2_0_FLASH_LITE,
        ModelVariant.GEMINI_2_5_FLASH,
        ModelVariant.GEMINI_2_5_FLASH_LITE,
        ModelVariant.GEMINI_2_5_PRO,
    ],
)
def test_text_variants_do_not_produce_images(variant: ModelVariant) -> None:
    assert not variant.default_modalities.produces(Modality.IMAGE)
    assert variant.default_modalities.accepts(Modality.IMAGE)


def test_speech_variants_produce_audio() -> None:
    config = ModelVariant.GEMINI_2_5_PRO_PREVIEW_TTS.default_modalities
    assert config.outputs == frozenset({Modality.AUDIO})
    assert not config.accepts(Modality.IMAGE)


def test_system_instruction_support() -> None:
    assert GoogleModel.parse("gemini-2.5-flash").supports_system_instruction
    assert not GoogleModel.parse(
        "gemini-2.0-flash-exp-image-generation"
    ).supports_system_instruction


def test_ensure_within_rejects_unsupported_output() -> None:
    supported = ModelVariant.GEMINI_2_5_PRO.default_modalities
    requested = ModalityConfig(inputs=[Modality.TEXT], outputs=[Modality.TEXT, Modality.IMAGE])

    with pytest.raises(ModalityNotSupportedError) as exc_info:
        requested.ensure_within(supported, "gemini-2.5-pro")

    assert exc_info.value.direction == "output"
    assert exc_info.value.modalities == ["IMAGE"]


def test_ensure_within_accepts_subset() -> None:
    supported = ModelVariant.GEMINI_2_0_FLASH_EXP_IMAGE_GENERATION.default_modalities
    ModalityConfig(inputs=[Modality.TEXT], outputs=[Modality.IMAGE]).ensure_within(
        supported, "gemini-2.0-flash-exp-image-generation"
    )
