"""
Index domain model.

Describes the persisted retrieval corpus written by one ingestion run.
Field aliases are the on-disk JSON keys.

Dependencies: pydantic, planabrain.models.chunk
System role: Versioned index file schema
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from planabrain.models.chunk import StoredChunk

INDEX_VERSION = 1


class StoredIndex(BaseModel):
    """Complete persisted index: every chunk with its embedding."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: Literal[1] = Field(default=INDEX_VERSION, description="Index format version")
    embedding_model: str = Field(
        alias="embeddingModel",
        description="Embedding model that produced every chunk embedding",
    )
    embedding_dimension: int | None = Field(
        default=None,
        alias="embeddingDimension",
        description="Cached embedding dimension",
    )
    chunks: list[StoredChunk] = Field(default_factory=list, description="Chunks in ingestion order")

    @field_validator("embedding_dimension", mode="before")
    @classmethod
    def _optional_dimension(cls, value: object) -> int | None:
        """Malformed or non-positive cached dimensions count as absent."""
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            return None
        return value

    def resolved_dimension(self) -> int:
        """
        Return the index embedding dimension.

        Uses the cached dimension when present, otherwise the length of the
        first chunk with a non-empty embedding. Returns 0 when neither exists.
        """
        if self.embedding_dimension is not None:
            return self.embedding_dimension
        for chunk in self.chunks:
            if chunk.embedding:
                return len(chunk.embedding)
        return 0
