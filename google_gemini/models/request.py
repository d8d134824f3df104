"""Request models for the Gemini generateContent endpoint."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .common import Content, HarmCategory, Modality


class HarmBlockThreshold(str, Enum):
    """Probability level at which content is blocked."""

    HARM_BLOCK_THRESHOLD_UNSPECIFIED = "HARM_BLOCK_THRESHOLD_UNSPECIFIED"
    BLOCK_LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
    BLOCK_NONE = "BLOCK_NONE"
    OFF = "OFF"


class SafetySetting(BaseModel):
    """Safety setting for content generation."""

    category: HarmCategory = Field(..., description="Safety category")
    threshold: HarmBlockThreshold = Field(
        default=HarmBlockThreshold.BLOCK_LOW_AND_ABOVE, description="Safety threshold"
    )


class ImageConfig(BaseModel):
    """Image configuration for generation."""

    aspectRatio: str | None = Field(default=None, description="Aspect ratio (e.g., '1:1', '16:9')")


class PrebuiltVoiceConfig(BaseModel):
    voiceName: str = Field(..., description="Name of the prebuilt voice")


class VoiceConfig(BaseModel):
    prebuiltVoiceConfig: PrebuiltVoiceConfig = Field(..., description="Prebuilt voice")


class SpeechConfig(BaseModel):
    """Speech configuration for audio output."""

    voiceConfig: VoiceConfig = Field(..., description="Voice selection")
    languageCode: str | None = Field(default=None, description="BCP-47 language code")


class ThinkingConfig(BaseModel):
    """Thinking configuration for models that support it."""

    includeThoughts: bool | None = Field(default=None, description="Return thought summaries")
    thinkingBudget: int | None = Field(default=None, description="Thinking token budget")


class GenerationConfig(BaseModel):
    """Generation configuration."""

    stopSequences: list[str] | None = Field(default=None, description="Stop sequences")
    responseMimeType: str | None = Field(default=None, description="Response MIME type")
    responseSchema: "Schema | None" = Field(default=None, description="Response schema")
    responseModalities: list[Modality] | None = Field(
        default=None, description="Response modalities"
    )
    candidateCount: int | None = Field(default=None, description="Number of candidates")
    maxOutputTokens: int | None = Field(default=None, description="Maximum output tokens")
    temperature: float | None = Field(default=None, description="Temperature for generation")
    topP: float | None = Field(default=None, description="Top P for generation")
    topK: int | None = Field(default=None, description="Top K for generation")
    seed: int | None = Field(default=None, description="Sampling seed")
    presencePenalty: float | None = Field(default=None, description="Presence penalty")
    frequencyPenalty: float | None = Field(default=None, description="Frequency penalty")
    speechConfig: SpeechConfig | None = Field(default=None, description="Speech configuration")
    thinkingConfig: ThinkingConfig | None = Field(
        default=None, description="Thinking configuration"
    )
    imageConfig: ImageConfig | None = Field(default=None, description="Image configuration")


class Schema(BaseModel):
    """Subset of the OpenAPI schema used for tools and structured output."""

    type: str = Field(default="TYPE_UNSPECIFIED", description="Data type")
    format: str | None = Field(default=None, description="Data format")
    title: str | None = Field(default=None, description="Title")
    description: str | None = Field(default=None, description="Description")
    nullable: bool | None = Field(default=None, description="Whether null is allowed")
    enum: list[str] | None = Field(default=None, description="Allowed values")
    properties: dict[str, "Schema"] | None = Field(default=None, description="Object properties")
    required: list[str] | None = Field(default=None, description="Required properties")
    propertyOrdering: list[str] | None = Field(default=None, description="Property order")
    items: "Schema | None" = Field(default=None, description="Array item schema")
    anyOf: list["Schema"] | None = Field(default=None, description="Alternatives")
    minimum: float | None = Field(default=None, description="Minimum value")
    maximum: float | None = Field(default=None, description="Maximum value")
    example: Any | None = Field(default=None, description="Example value")

    @field_validator("type")
    @classmethod
    def _upper_type(cls, value: str) -> str:
        # JSON Schema spells types in lowercase
        return value.upper()


class FunctionDeclaration(BaseModel):
    """Function the model may call."""

    name: str = Field(..., description="Function name")
    description: str = Field(default="", description="Function description")
    parameters: Schema | None = Field(default=None, description="Parameter schema")
    response: Schema | None = Field(default=None, description="Response schema")


class ToolGoogleSearch(BaseModel):
    """Google Search tool configuration."""
    pass


class ToolCodeExecution(BaseModel):
    """Code execution tool configuration."""
    pass


class ToolUrlContext(BaseModel):
    """URL context tool configuration."""
    pass


class Tool(BaseModel):
    """Tool configuration."""

    functionDeclarations: list[FunctionDeclaration] | None = Field(
        default=None, description="Function declarations"
    )
    googleSearch: ToolGoogleSearch | None = Field(default=None, description="Google Search tool")
    codeExecution: ToolCodeExecution | None = Field(
        default=None, description="Code execution tool"
    )
    urlContext: ToolUrlContext | None = Field(default=None, description="URL context tool")


class FunctionCallingConfig(BaseModel):
    mode: str | None = Field(default=None, description="AUTO, ANY, NONE or VALIDATED")
    allowedFunctionNames: list[str] | None = Field(
        default=None, description="Functions the model may call"
    )


class ToolConfig(BaseModel):
    """Tool configuration shared by all tools in the request."""

    functionCallingConfig: FunctionCallingConfig | None = Field(
        default=None, description="Function calling configuration"
    )


class GenerateContentRequest(BaseModel):
    """Request model for generateContent endpoint."""

    contents: list[Content] = Field(..., description="Contents to generate from")
    generationConfig: GenerationConfig | None = Field(
        default=None, description="Generation configuration"
    )
    safetySettings: list[SafetySetting] | None = Field(
        default=None, description="Safety settings"
    )
    systemInstruction: Content | None = Field(
        default=None, description="System instruction"
    )
    tools: list[Tool] | None = Field(default=None, description="Tools configuration")
    toolConfig: ToolConfig | None = Field(default=None, description="Tool configuration")
    cachedContent: str | None = Field(default=None, description="Cached content name")

    def to_payload(self) -> dict:
        """Serialize to the JSON body expected by the API."""
        return self.model_dump(mode="json", exclude_none=True)


GenerationConfig.model_rebuild()
