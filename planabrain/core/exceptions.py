"""
Exception hierarchy for planabrain.

Provides layered exception structure for retrieval, ingestion and answering.
All exceptions carry a human-readable message and optional context details.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any

INGEST_REMEDY = "Run: planabrain ingest <sourceDir>"


class PlanabrainError(Exception):
    """Base exception for all planabrain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(PlanabrainError):
    """Raised when required configuration (e.g. an API key) is missing."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class DimensionMismatchError(PlanabrainError):
    """Raised when two vectors of different length are compared."""

    def __init__(self, left: int, right: int) -> None:
        """
        Initialize dimension mismatch error.

        Args:
            left: Length of the first vector
            right: Length of the second vector
        """
        self.left = left
        self.right = right
        super().__init__(f"Embedding dimension mismatch: {left} != {right}")


class SourceDirectoryNotFoundError(PlanabrainError):
    """Raised when the ingestion source directory does not exist."""

    def __init__(self, source_dir: str) -> None:
        self.source_dir = source_dir
        super().__init__(f"Source directory not found: {source_dir}")


# ----------------------------------------------------------------------------
# Index store
# ----------------------------------------------------------------------------


class IndexStoreError(PlanabrainError):
    """Base exception for index file errors."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize index store error.

        Args:
            message: Error message
            path: Index file path involved
            details: Additional context
        """
        self.path = path
        super().__init__(message, details)


class IndexNotFoundError(IndexStoreError):
    """Raised when no index file exists at the configured path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Index not found: {path}\n{INGEST_REMEDY}", path)


class UnsupportedIndexVersionError(IndexStoreError):
    """Raised when the index file declares an unknown format version."""

    def __init__(self, version: Any, path: str | None = None) -> None:
        self.version = version
        super().__init__(
            f"Unsupported index version: {version!r}\n{INGEST_REMEDY}",
            path,
        )


class InvalidIndexError(IndexStoreError):
    """Raised when the index file or its embeddings are unusable."""

    def __init__(
        self,
        message: str = "Index embeddings are invalid.",
        path: str | None = None,
    ) -> None:
        super().__init__(f"{message}\n{INGEST_REMEDY}", path)


# ----------------------------------------------------------------------------
# Retrieval
# ----------------------------------------------------------------------------


class RetrievalError(PlanabrainError):
    """Base exception for query-time retrieval errors."""

    pass


class NoValidEmbeddingsError(RetrievalError):
    """Raised when no stored chunk is comparable with the query embedding."""

    def __init__(self, query_dimension: int, chunk_count: int) -> None:
        self.query_dimension = query_dimension
        self.chunk_count = chunk_count
        super().__init__(
            f"No valid embeddings found in index.\n{INGEST_REMEDY}",
            {"query_dimension": query_dimension, "chunks": chunk_count},
        )


class EmbeddingModelMismatchError(RetrievalError):
    """Raised when the index was built with a different embedding model."""

    def __init__(self, index_model: str, current_model: str) -> None:
        self.index_model = index_model
        self.current_model = current_model
        super().__init__(
            "Embedding model mismatch.\n"
            f"Index: {index_model}\n"
            f"Current: {current_model}\n"
            f"{INGEST_REMEDY}"
        )


class QueryDimensionMismatchError(RetrievalError):
    """Raised when the question embedding does not match the index dimension."""

    def __init__(self, index_dimension: int, query_dimension: int) -> None:
        self.index_dimension = index_dimension
        self.query_dimension = query_dimension
        super().__init__(
            "Embedding dimension mismatch.\n"
            f"Index: {index_dimension}\n"
            f"Query: {query_dimension}\n"
            f"{INGEST_REMEDY}"
        )


# ----------------------------------------------------------------------------
# Ingestion embeddings
# ----------------------------------------------------------------------------


class EmbeddingError(PlanabrainError):
    """Base exception for embedding batches returned during ingestion."""

    pass


class EmbeddingCountMismatchError(EmbeddingError):
    """Raised when the embedding backend returns the wrong number of vectors."""

    def __init__(self, texts: int, embeddings: int) -> None:
        self.texts = texts
        self.embeddings = embeddings
        super().__init__(
            f"Embedding count mismatch: texts={texts} embeddings={embeddings}"
        )


class InvalidEmbeddingDimensionError(EmbeddingError):
    """Raised when the first embedding of a batch is empty."""

    def __init__(self, dimension: int, embedding_model: str) -> None:
        self.dimension = dimension
        self.embedding_model = embedding_model
        super().__init__(
            f"Embedding dimension invalid ({dimension}). "
            f"Check embedding model: {embedding_model}"
        )


class EmbeddingDimensionMismatchError(EmbeddingError):
    """Raised when a batch embedding differs in length from the first one."""

    def __init__(self, chunk_index: int, expected: int, actual: int) -> None:
        self.chunk_index = chunk_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Embedding dimension mismatch at chunk {chunk_index}: "
            f"expected={expected} actual={actual}"
        )
