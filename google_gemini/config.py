"""Configuration management for the client library."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Credentials
    gemini_api_key: str | None = Field(
        default=None, description="Google AI Studio API key (GEMINI_API_KEY)"
    )

    # Model Configuration
    gemini_model: str = Field(
        default="gemini-2.0-flash", description="Model name (GEMINI_MODEL)"
    )

    # Endpoint Configuration
    base_api: str = Field(
        default="https://generativelanguage.googleapis.com",
        description="Generative Language API base URL",
    )
    api_version: str = Field(default="v1beta", description="API version path segment")

    # Transport Configuration
    timeout: int = Field(default=120, description="Request timeout in seconds")
    proxy: str | None = Field(default=None, description="HTTP proxy URL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
