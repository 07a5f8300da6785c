"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

import os
from functools import lru_cache

from pydantic import Field, model_validator

from planabrain.configs.base import BaseSettings
from planabrain.configs.gemini import GeminiSettings
from planabrain.configs.memory import MemorySettings
from planabrain.configs.retrieval import RetrievalSettings
from planabrain.core.prompts import DEFAULT_SYSTEM_PROMPT


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    system_prompt: str = Field(
        default=DEFAULT_SYSTEM_PROMPT,
        description="System prompt sent with every chat request",
    )
    user_id: str = Field(
        default="cli",
        description="Memory owner for CLI conversations",
    )

    # Aggregated settings
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    memory: MemorySettings = Field(default_factory=MemorySettings)

    @model_validator(mode="after")
    def _default_memory_dir(self) -> "Settings":
        """Place memory next to the index unless configured explicitly."""
        if not self.memory.dir:
            index_dir = os.path.dirname(self.retrieval.index_path)
            self.memory.dir = os.path.join(index_dir, "memory")
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for the process lifetime.
    Environment variables loaded once at first use.

    Returns:
        Settings: Application settings instance

    Usage:
        from planabrain.configs import get_settings
        settings = get_settings()
    """
    return Settings()
