"""
Retrieval core: cosine similarity and top-k search.

Exports: cosine_similarity, top_k_similar_chunks, SearchStats
"""

from .search import SearchStats, top_k_similar_chunks
from .similarity import cosine_similarity

__all__ = ["SearchStats", "cosine_similarity", "top_k_similar_chunks"]
