"""
Retrieval configuration settings.

Index location, chunking policy and top-k for the local vector index.

Dependencies: pydantic, pydantic_settings
System role: Vector index configuration for ingestion and answering
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Local JSON vector index configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PLANABRAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    index_path: str = Field(
        default=".planabrain/index.json",
        description="Path of the persisted index file",
    )
    chunk_size: int = Field(
        default=1000,
        description="Maximum chunk size in characters",
        gt=0,
    )
    chunk_overlap: int = Field(
        default=150,
        description="Overlap between consecutive chunks",
        ge=0,
    )
    top_k: int = Field(
        default=4,
        description="Number of chunks retrieved as answer context",
        ge=1,
    )
