"""
Ingestion pipeline orchestrator.

Coordinates source loading, chunking, bulk embedding and index saving.
Every run replaces the whole index; there is no partial or append ingestion.

Dependencies: langchain_core, planabrain.boundary, planabrain.core.rag.chunking
System role: Sole writer of the vector index
"""

import logging
import time
from collections.abc import Sequence

from langchain_core.embeddings import Embeddings

from planabrain.boundary.gemini import create_embeddings
from planabrain.boundary.index_store import save_index
from planabrain.boundary.source_loader import SourceDirectoryLoader
from planabrain.configs.settings import Settings
from planabrain.core.exceptions import (
    EmbeddingCountMismatchError,
    EmbeddingDimensionMismatchError,
    InvalidEmbeddingDimensionError,
)
from planabrain.core.rag.chunking import ChunkingTask
from planabrain.models.chunk import StoredChunk
from planabrain.models.index import INDEX_VERSION, StoredIndex

logger = logging.getLogger(__name__)


def validate_embedding_batch(
    vectors: Sequence[Sequence[float]],
    text_count: int,
    embedding_model: str,
) -> int:
    """
    Check a bulk embedding response and return its dimension.

    Args:
        vectors: Embeddings returned by the backend, one per text
        text_count: Number of texts that were embedded
        embedding_model: Model ID, reported when the dimension is invalid

    Returns:
        int: Shared embedding dimension

    Raises:
        EmbeddingCountMismatchError: When len(vectors) != text_count
        InvalidEmbeddingDimensionError: When the first embedding is empty
        EmbeddingDimensionMismatchError: When a later embedding differs in length
    """
    if len(vectors) != text_count:
        raise EmbeddingCountMismatchError(text_count, len(vectors))

    dimension = len(vectors[0]) if vectors else 0
    if dimension <= 0:
        raise InvalidEmbeddingDimensionError(dimension, embedding_model)

    for i, vector in enumerate(vectors):
        if len(vector) != dimension:
            raise EmbeddingDimensionMismatchError(i, dimension, len(vector))

    return dimension


class IngestPipeline:
    """Orchestrate ingestion: load -> chunk -> embed -> save index."""

    def __init__(
        self,
        settings: Settings,
        embeddings: Embeddings | None = None,
        loader: SourceDirectoryLoader | None = None,
        chunking_task: ChunkingTask | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration and collaborators.

        Args:
            settings: Application settings
            embeddings: Embedding client (Gemini from settings if None)
            loader: Source directory loader
            chunking_task: Document splitter (sizes from settings if None)
        """
        self._settings = settings
        self._embeddings = embeddings
        self._loader = loader or SourceDirectoryLoader()
        self._chunking_task = chunking_task or ChunkingTask(
            chunk_size=settings.retrieval.chunk_size,
            chunk_overlap=settings.retrieval.chunk_overlap,
        )

    def _get_embeddings(self) -> Embeddings:
        if self._embeddings is None:
            self._embeddings = create_embeddings(self._settings.gemini)
        return self._embeddings

    def run(self, source_dir: str) -> int:
        """
        Ingest source_dir into a fresh index.

        Args:
            source_dir: Directory of text/code files

        Returns:
            int: Number of chunks written

        Raises:
            SourceDirectoryNotFoundError: source_dir does not exist
            EmbeddingCountMismatchError: Backend returned the wrong number of vectors
            InvalidEmbeddingDimensionError: No chunks, or first embedding empty
            EmbeddingDimensionMismatchError: Embeddings differ in length
        """
        start_time = time.perf_counter()
        embedding_model = self._settings.gemini.embedding_model

        documents = self._loader.load(source_dir)
        splits = self._chunking_task.chunk(documents)

        texts = [doc.page_content for doc in splits]
        sources = [str(doc.metadata.get("source", "")) for doc in splits]

        if not texts:
            logger.warning(f"{__name__}:run - no chunks produced from {source_dir}")
            raise InvalidEmbeddingDimensionError(0, embedding_model)

        logger.info(f"{__name__}:run - embedding {len(texts)} chunks with {embedding_model}")
        vectors = self._get_embeddings().embed_documents(texts)
        dimension = validate_embedding_batch(vectors, len(texts), embedding_model)

        chunks = [
            StoredChunk.create(source=source, text=text, embedding=vector)
            for source, text, vector in zip(sources, texts, vectors)
        ]
        index = StoredIndex(
            version=INDEX_VERSION,
            embedding_model=embedding_model,
            embedding_dimension=dimension,
            chunks=chunks,
        )
        save_index(self._settings.retrieval.index_path, index)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:run - COMPLETE chunks={len(chunks)}, dim={dimension}, "
            f"elapsed_ms={elapsed_ms:.0f}"
        )
        return len(chunks)


def ingest_directory(
    source_dir: str,
    settings: Settings,
    embeddings: Embeddings | None = None,
    loader: SourceDirectoryLoader | None = None,
) -> int:
    """
    Ingest a directory into the index configured in settings.

    Args:
        source_dir: Directory of text/code files
        settings: Application settings
        embeddings: Optional embedding client override
        loader: Optional source loader override

    Returns:
        int: Number of chunks written
    """
    pipeline = IngestPipeline(settings, embeddings=embeddings, loader=loader)
    return pipeline.run(source_dir)
