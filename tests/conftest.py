"""Shared fixtures for client tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest


def make_http_response(payload=None, status_code: int = 200, text: str | None = None) -> MagicMock:
    """Build a stand-in for a curl_cffi response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = text if text is not None else ("" if payload is None else str(payload))
    return response


@pytest.fixture
def text_payload() -> dict:
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": "Hello, "}, {"text": "world"}]},
                "finishReason": "STOP",
                "index": 0,
            }
        ],
        "usageMetadata": {
            "promptTokenCount": 4,
            "candidatesTokenCount": 2,
            "totalTokenCount": 6,
        },
        "modelVersion": "gemini-2.5-flash",
    }


@pytest.fixture
def image_payload() -> dict:
    return {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [
                        {"inlineData": {"mimeType": "image/png", "data": "aGVsbG8="}},
                        {"inlineData": {"mimeType": "image/jpeg", "data": "d29ybGQ="}},
                    ],
                },
                "finishReason": "STOP",
            }
        ],
        "modelVersion": "gemini-2.0-flash-exp-image-generation",
    }


@pytest.fixture
def session(text_payload: dict) -> MagicMock:
    """An async session whose post() returns a successful text response."""
    mock = MagicMock()
    mock.post = AsyncMock(return_value=make_http_response(text_payload))
    return mock
