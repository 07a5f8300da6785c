"""
Cosine similarity between embedding vectors.

Dependencies: math, planabrain.core.exceptions
System role: Relevance scoring for retrieval
"""

import math
from collections.abc import Sequence

from planabrain.core.exceptions import DimensionMismatchError


def cosine_similarity(a: Sequence[float | None], b: Sequence[float | None]) -> float:
    """
    Compute cosine similarity of two equal-length vectors.

    Missing (None) elements count as 0. Returns 0.0 when either vector
    has zero norm.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: Similarity in [-1.0, 1.0]

    Raises:
        DimensionMismatchError: When the vectors differ in length
    """
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b))

    dot = 0.0
    a2 = 0.0
    b2 = 0.0
    for av, bv in zip(a, b):
        av = av or 0.0
        bv = bv or 0.0
        dot += av * bv
        a2 += av * av
        b2 += bv * bv

    denom = math.sqrt(a2) * math.sqrt(b2)
    if denom == 0:
        return 0.0
    return dot / denom
