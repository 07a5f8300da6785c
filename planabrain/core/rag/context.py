"""
Context assembly for index answers.

Dependencies: planabrain.models
System role: Formats retrieved chunks into the prompt context block
"""

from collections.abc import Iterable

from planabrain.models.chunk import StoredChunk

CONTEXT_SEPARATOR = "\n\n---\n\n"


def build_context(chunks: Iterable[StoredChunk]) -> str:
    """
    Join chunks into labeled context blocks, in the given order.

    Args:
        chunks: Retrieved chunks, most relevant first

    Returns:
        str: "SOURCE: <source>\\n<text>" blocks separated by a --- rule
    """
    return CONTEXT_SEPARATOR.join(f"SOURCE: {c.source}\n{c.text}" for c in chunks)
