"""
Conversation memory configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Per-user chat history configuration for the web-search path
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MemorySettings(BaseSettings):
    """Bounded per-user conversation memory configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PLANABRAIN_MEMORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    enabled: bool = Field(
        default=True,
        description="Load and save per-user history around web-search answers",
    )
    max_messages: int = Field(
        default=20,
        description="Maximum number of stored messages per user",
    )
    dir: str | None = Field(
        default=None,
        description="Memory directory (defaults to <index dir>/memory)",
    )

    @field_validator("max_messages", mode="before")
    @classmethod
    def _clamp_max_messages(cls, value: object) -> int:
        """Unparsable or negative values disable memory instead of failing."""
        try:
            parsed = int(value)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return 0
        return max(0, parsed)

    @field_validator("enabled", mode="before")
    @classmethod
    def _parse_enabled(cls, value: object) -> bool:
        """Only "0" and "false" (any case) switch memory off."""
        if isinstance(value, bool):
            return value
        raw = str(value)
        return not (raw == "0" or raw.lower() == "false")
