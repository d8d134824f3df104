"""Models shared by Gemini API requests and responses.

See: https://ai.google.dev/api/generate-content
"""

import base64
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class Modality(str, Enum):
    """Content kind a model can accept or produce."""

    MODALITY_UNSPECIFIED = "MODALITY_UNSPECIFIED"
    TEXT = "TEXT"
    IMAGE = "IMAGE"
    AUDIO = "AUDIO"
    VIDEO = "VIDEO"


class HarmCategory(str, Enum):
    """Safety categories that can be configured per request."""

    HARM_CATEGORY_HARASSMENT = "HARM_CATEGORY_HARASSMENT"
    HARM_CATEGORY_HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    HARM_CATEGORY_SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
    HARM_CATEGORY_DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"
    HARM_CATEGORY_CIVIC_INTEGRITY = "HARM_CATEGORY_CIVIC_INTEGRITY"


class InlineData(BaseModel):
    """Inline data for image or audio content."""

    mimeType: str = Field(..., description="MIME type of the data")
    data: str = Field(..., description="Base64 encoded data")

    def decode(self) -> bytes:
        """Return the raw bytes of the blob."""
        return base64.b64decode(self.data)


class FileData(BaseModel):
    """Reference to a file uploaded through the Files API."""

    mimeType: str | None = Field(default=None, description="MIME type of the file")
    fileUri: str = Field(..., description="URI of the uploaded file")


class FunctionCall(BaseModel):
    """Function call predicted by the model."""

    id: str | None = Field(default=None, description="Call identifier")
    name: str = Field(..., description="Function name")
    args: dict[str, Any] | None = Field(default=None, description="Call arguments")


class FunctionResponse(BaseModel):
    """Result of a function call, sent back to the model."""

    id: str | None = Field(default=None, description="Call identifier")
    name: str = Field(..., description="Function name")
    response: dict[str, Any] = Field(..., description="Function output")


class ExecutableCode(BaseModel):
    """Code generated by the model for execution."""

    language: str = Field(default="PYTHON", description="Programming language")
    code: str = Field(..., description="Source code")


class CodeExecutionResult(BaseModel):
    """Outcome of executing model generated code."""

    outcome: str = Field(..., description="Execution outcome")
    output: str | None = Field(default=None, description="Captured output")


class Part(BaseModel):
    """Part of content, can be text, inline data or a tool interaction."""

    text: str | None = Field(default=None, description="Text content")
    thought: bool | None = Field(default=None, description="Whether this is a thought summary")
    inlineData: InlineData | None = Field(default=None, description="Inline data")
    fileData: FileData | None = Field(default=None, description="File reference")
    functionCall: FunctionCall | None = Field(default=None, description="Function call")
    functionResponse: FunctionResponse | None = Field(
        default=None, description="Function response"
    )
    executableCode: ExecutableCode | None = Field(default=None, description="Executable code")
    codeExecutionResult: CodeExecutionResult | None = Field(
        default=None, description="Code execution result"
    )


class Content(BaseModel):
    """Content with role and parts."""

    role: Literal["user", "model"] = Field(default="user", description="Role of the content")
    parts: list[Part] = Field(default_factory=list, description="Parts of the content")
