"""
Index-backed question answering.

Loads the local index, embeds the question, retrieves the most similar
chunks and asks the chat model to answer from that context.
Supports sync invoke() and async ainvoke().

Dependencies: langchain_core, planabrain.boundary, planabrain.core.retrieval
System role: RAG answer orchestration
"""

import logging
from collections.abc import Sequence

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from planabrain.boundary.gemini import create_chat_model, create_embeddings
from planabrain.boundary.index_store import load_index
from planabrain.configs.settings import Settings
from planabrain.core.chat.messages import message_text
from planabrain.core.exceptions import (
    EmbeddingModelMismatchError,
    InvalidIndexError,
    QueryDimensionMismatchError,
)
from planabrain.core.prompts import INDEX_QUESTION_TEMPLATE
from planabrain.core.rag.context import build_context
from planabrain.core.retrieval import SearchStats, top_k_similar_chunks
from planabrain.models.chunk import ScoredChunk
from planabrain.models.index import StoredIndex

logger = logging.getLogger(__name__)


class AnswerPipeline:
    """
    Answer questions from the local vector index.

    Clients are created lazily so that index and model checks fail before
    any network call is made.
    """

    def __init__(
        self,
        settings: Settings,
        embeddings: Embeddings | None = None,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize pipeline with settings and optional client overrides.

        Args:
            settings: Application settings
            embeddings: Embedding client (Gemini from settings if None)
            chat_model: Chat model (Gemini from settings if None)
        """
        self._settings = settings
        self._embeddings = embeddings
        self._chat_model = chat_model

    def _get_embeddings(self) -> Embeddings:
        if self._embeddings is None:
            self._embeddings = create_embeddings(self._settings.gemini)
        return self._embeddings

    def _get_chat_model(self) -> BaseChatModel:
        if self._chat_model is None:
            self._chat_model = create_chat_model(self._settings.gemini)
        return self._chat_model

    def _load_checked_index(self) -> StoredIndex:
        """Load the index and reject one built with another embedding model."""
        index = load_index(self._settings.retrieval.index_path)
        current_model = self._settings.gemini.embedding_model
        if index.embedding_model != current_model:
            raise EmbeddingModelMismatchError(index.embedding_model, current_model)
        return index

    def _retrieve(self, index: StoredIndex, query_embedding: Sequence[float]) -> list[ScoredChunk]:
        """Validate the query dimension and return the top-k matches."""
        expected_dim = index.resolved_dimension()
        if expected_dim <= 0:
            raise InvalidIndexError(path=self._settings.retrieval.index_path)
        if len(query_embedding) != expected_dim:
            raise QueryDimensionMismatchError(expected_dim, len(query_embedding))

        stats = SearchStats()
        top = top_k_similar_chunks(
            query_embedding,
            index.chunks,
            self._settings.retrieval.top_k,
            stats=stats,
        )
        logger.info(
            f"{__name__}:_retrieve - returned={stats.returned}, "
            f"excluded={stats.excluded}, considered={stats.considered}"
        )
        return top

    def _build_messages(self, question: str, top: list[ScoredChunk]) -> list[BaseMessage]:
        context = build_context(match.chunk for match in top)
        return [
            SystemMessage(content=self._settings.system_prompt),
            HumanMessage(content=INDEX_QUESTION_TEMPLATE.format(question=question, context=context)),
        ]

    def invoke(self, question: str) -> str:
        """
        Answer a question using index retrieval.

        Args:
            question: User's question

        Returns:
            str: Chat model answer

        Raises:
            IndexNotFoundError: No index at the configured path
            UnsupportedIndexVersionError: Index format not supported
            EmbeddingModelMismatchError: Index built with another embedding model
            InvalidIndexError: Index has no usable embedding dimension
            QueryDimensionMismatchError: Question embedding length differs
            NoValidEmbeddingsError: No chunk comparable with the question
        """
        index = self._load_checked_index()
        query_embedding = self._get_embeddings().embed_query(question)
        top = self._retrieve(index, query_embedding)
        result = self._get_chat_model().invoke(self._build_messages(question, top))
        return message_text(result)

    async def ainvoke(self, question: str) -> str:
        """
        Async version of invoke.

        Args:
            question: User's question

        Returns:
            str: Chat model answer
        """
        index = self._load_checked_index()
        query_embedding = await self._get_embeddings().aembed_query(question)
        top = self._retrieve(index, query_embedding)
        result = await self._get_chat_model().ainvoke(self._build_messages(question, top))
        return message_text(result)


def answer_question(
    question: str,
    settings: Settings,
    embeddings: Embeddings | None = None,
    chat_model: BaseChatModel | None = None,
) -> str:
    """Answer a question from the local index."""
    return AnswerPipeline(settings, embeddings=embeddings, chat_model=chat_model).invoke(question)


async def aanswer_question(
    question: str,
    settings: Settings,
    embeddings: Embeddings | None = None,
    chat_model: BaseChatModel | None = None,
) -> str:
    """Async version of answer_question."""
    pipeline = AnswerPipeline(settings, embeddings=embeddings, chat_model=chat_model)
    return await pipeline.ainvoke(question)
