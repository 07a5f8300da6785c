"""
Chunk domain models.

Represents an embedded text chunk as persisted in the index, and the
ephemeral scored match produced by a similarity search.

Dependencies: pydantic, hashlib
System role: Chunk data structures for ingestion and retrieval
"""

import hashlib

from pydantic import BaseModel, ConfigDict, Field


def chunk_id_for(source: str, text: str) -> str:
    """
    Generate deterministic chunk ID from source and text.

    Identical text from the same source always yields the same ID.

    Args:
        source: Origin file path
        text: Chunk text content

    Returns:
        str: SHA-256 hex digest of source + newline + text
    """
    return hashlib.sha256(f"{source}\n{text}".encode("utf-8")).hexdigest()


class StoredChunk(BaseModel):
    """Embedded chunk as stored in the index file."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic chunk identifier (content hash)")
    source: str = Field(description="Origin file path (informational)")
    text: str = Field(description="Chunk text content")
    embedding: list[float | None] = Field(
        default_factory=list,
        description="Embedding vector (null elements score as 0)",
    )

    @classmethod
    def create(cls, source: str, text: str, embedding: list[float | None]) -> "StoredChunk":
        """Build a chunk with its content-addressed ID."""
        return cls(
            id=chunk_id_for(source, text),
            source=source,
            text=text,
            embedding=list(embedding),
        )


class ScoredChunk(BaseModel):
    """Single result from similarity search. Never persisted."""

    model_config = ConfigDict(frozen=True)

    chunk: StoredChunk = Field(description="Matched chunk")
    score: float = Field(description="Cosine similarity (-1.0 to 1.0)")
