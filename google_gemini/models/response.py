"""Response models for the Gemini generateContent endpoint."""

from pydantic import BaseModel, Field

from .common import Content


class SafetyRating(BaseModel):
    """Safety rating for a piece of content."""

    category: str = Field(..., description="Safety category")
    probability: str = Field(..., description="Harm probability")
    blocked: bool = Field(default=False, description="Whether content was blocked")


class CitationSource(BaseModel):
    startIndex: int | None = Field(default=None, description="Start of the cited segment")
    endIndex: int | None = Field(default=None, description="End of the cited segment")
    uri: str | None = Field(default=None, description="Source URI")
    license: str | None = Field(default=None, description="Source license")


class CitationMetadata(BaseModel):
    citationSources: list[CitationSource] = Field(
        default_factory=list, description="Cited sources"
    )


class Candidate(BaseModel):
    """Candidate response from the model."""

    content: Content = Field(default_factory=Content, description="Content of the candidate")
    finishReason: str | None = Field(default=None, description="Reason for finishing")
    safetyRatings: list[SafetyRating] = Field(
        default_factory=list, description="Safety ratings"
    )
    citationMetadata: CitationMetadata | None = Field(
        default=None, description="Citation metadata"
    )
    avgLogprobs: float | None = Field(default=None, description="Average log probability")
    tokenCount: int | None = Field(default=None, description="Token count")
    index: int = Field(default=0, description="Index of the candidate")


class PromptFeedback(BaseModel):
    """Feedback on the prompt, set when the prompt was blocked."""

    blockReason: str | None = Field(default=None, description="Reason the prompt was blocked")
    safetyRatings: list[SafetyRating] = Field(
        default_factory=list, description="Safety ratings"
    )


class ModalityTokenCount(BaseModel):
    modality: str = Field(..., description="Modality")
    tokenCount: int = Field(default=0, description="Token count")


class UsageMetadata(BaseModel):
    """Usage metadata for the response."""

    promptTokenCount: int = Field(default=0, description="Prompt token count")
    cachedContentTokenCount: int = Field(default=0, description="Cached content token count")
    candidatesTokenCount: int = Field(default=0, description="Candidates token count")
    toolUsePromptTokenCount: int = Field(default=0, description="Tool use prompt token count")
    thoughtsTokenCount: int = Field(default=0, description="Thoughts token count")
    totalTokenCount: int = Field(default=0, description="Total token count")
    promptTokensDetails: list[ModalityTokenCount] = Field(
        default_factory=list, description="Prompt tokens per modality"
    )
    candidatesTokensDetails: list[ModalityTokenCount] = Field(
        default_factory=list, description="Candidate tokens per modality"
    )


class GenerateContentResponse(BaseModel):
    """Response model for generateContent endpoint."""

    candidates: list[Candidate] = Field(
        default_factory=list, description="Candidates from generation"
    )
    promptFeedback: PromptFeedback | None = Field(default=None, description="Prompt feedback")
    usageMetadata: UsageMetadata = Field(
        default_factory=UsageMetadata, description="Usage metadata"
    )
    modelVersion: str | None = Field(default=None, description="Model version used")
    responseId: str | None = Field(default=None, description="Response identifier")


class ErrorDetail(BaseModel):
    """Error detail in response."""

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    status: str | None = Field(default=None, description="Error status")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: ErrorDetail = Field(..., description="Error details")
