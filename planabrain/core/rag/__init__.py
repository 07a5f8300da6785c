"""
Retrieval-augmented pipelines: ingestion and index answers.

Exports: IngestPipeline, ingest_directory, AnswerPipeline, answer_question,
aanswer_question, build_context
"""

from .answer import AnswerPipeline, aanswer_question, answer_question
from .context import build_context
from .ingest import IngestPipeline, ingest_directory, validate_embedding_batch

__all__ = [
    "AnswerPipeline",
    "IngestPipeline",
    "aanswer_question",
    "answer_question",
    "build_context",
    "ingest_directory",
    "validate_embedding_batch",
]
