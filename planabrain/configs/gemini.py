"""
Gemini configuration settings.

Chat model, embedding model and credentials for Google Generative AI.

Dependencies: pydantic, pydantic_settings
System role: Hosted model configuration for chat and embeddings
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Google Gemini chat and embedding configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PLANABRAIN_GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    google_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "GEMINI_API_KEY"),
        description="Google API key used by both chat and embedding clients",
    )
    model: str = Field(
        default="gemini-3-flash-preview",
        description="Gemini chat model ID",
    )
    embedding_model: str = Field(
        default="gemini-embedding-001",
        description="Gemini embedding model ID (recorded in the index)",
    )
    temperature: float = Field(
        default=1.0,
        description="Chat model temperature",
    )
