"""
Domain models.

Exports: StoredChunk, ScoredChunk, StoredIndex, StoredChatMessage, StoredChatFile
"""

from .chunk import ScoredChunk, StoredChunk, chunk_id_for
from .index import INDEX_VERSION, StoredIndex
from .memory import MEMORY_VERSION, StoredChatFile, StoredChatMessage

__all__ = [
    "INDEX_VERSION",
    "MEMORY_VERSION",
    "ScoredChunk",
    "StoredChatFile",
    "StoredChatMessage",
    "StoredChunk",
    "StoredIndex",
    "chunk_id_for",
]
