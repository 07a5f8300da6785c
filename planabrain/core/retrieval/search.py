"""
Top-k similarity search over stored chunks.

Full linear scan of the flat chunk list with cosine scoring. Chunks whose
embedding length differs from the query are skipped, not reported.

Dependencies: planabrain.core.retrieval.similarity, planabrain.models
System role: RAG retrieval business logic
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from planabrain.core.exceptions import NoValidEmbeddingsError
from planabrain.core.retrieval.similarity import cosine_similarity
from planabrain.models.chunk import ScoredChunk, StoredChunk

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Diagnostic counters filled in by top_k_similar_chunks."""

    considered: int = 0
    excluded: int = 0
    returned: int = 0


def top_k_similar_chunks(
    query_embedding: Sequence[float],
    chunks: Sequence[StoredChunk],
    k: int,
    stats: SearchStats | None = None,
) -> list[ScoredChunk]:
    """
    Return the k chunks most similar to the query embedding.

    Results are ordered by descending score; equal scores are ordered by
    ascending chunk ID so rankings are reproducible.

    Args:
        query_embedding: Query vector
        chunks: Candidate chunks
        k: Maximum number of results
        stats: Optional counters updated with considered/excluded/returned

    Returns:
        list[ScoredChunk]: At most k scored chunks

    Raises:
        NoValidEmbeddingsError: When the query is empty or no chunk has a
            matching embedding length
    """
    expected_dim = len(query_embedding)
    valid = [c for c in chunks if len(c.embedding) == expected_dim]
    excluded = len(chunks) - len(valid)

    if stats is not None:
        stats.considered = len(chunks)
        stats.excluded = excluded
        stats.returned = 0

    if expected_dim == 0 or not valid:
        raise NoValidEmbeddingsError(expected_dim, len(chunks))

    if excluded:
        logger.debug(
            f"{__name__}:top_k_similar_chunks - excluded {excluded} of "
            f"{len(chunks)} chunks with embedding length != {expected_dim}"
        )

    scored = [
        ScoredChunk(chunk=chunk, score=cosine_similarity(query_embedding, chunk.embedding))
        for chunk in valid
    ]
    scored.sort(key=lambda s: (-s.score, s.chunk.id))
    top = scored[: max(k, 0)]

    if stats is not None:
        stats.returned = len(top)
    return top
