"""
Shared test fixtures and configuration for entire test suite.

Provides: isolated settings, stub embedding client, chunk/index builders
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from langchain_core.embeddings import Embeddings

from planabrain.configs import GeminiSettings, MemorySettings, RetrievalSettings, Settings
from planabrain.models import StoredChunk, StoredIndex

ENV_VARS = (
    "GOOGLE_API_KEY",
    "GEMINI_API_KEY",
    "PLANABRAIN_INDEX_PATH",
    "PLANABRAIN_GEMINI_MODEL",
    "PLANABRAIN_GEMINI_EMBEDDING_MODEL",
    "PLANABRAIN_SYSTEM_PROMPT",
    "PLANABRAIN_USER_ID",
    "PLANABRAIN_LOG_LEVEL",
    "PLANABRAIN_MEMORY_ENABLED",
    "PLANABRAIN_MEMORY_MAX_MESSAGES",
    "PLANABRAIN_MEMORY_DIR",
    "PLANABRAIN_CHUNK_SIZE",
    "PLANABRAIN_CHUNK_OVERLAP",
    "PLANABRAIN_TOP_K",
)


class StubEmbeddings(Embeddings):
    """Embedding client returning canned vectors and recording calls."""

    def __init__(
        self,
        document_vectors: list[list[float]] | None = None,
        query_vector: list[float] | None = None,
    ) -> None:
        self.document_vectors = document_vectors
        self.query_vector = query_vector if query_vector is not None else [1.0, 0.0]
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        if self.document_vectors is None:
            return [[1.0, 0.0] for _ in texts]
        return [list(v) for v in self.document_vectors]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return list(self.query_vector)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the developer's environment and .env files."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def index_path(tmp_path: Path) -> Path:
    """Index file location inside the test's temp directory."""
    return tmp_path / "store" / "index.json"


@pytest.fixture
def make_settings(tmp_path: Path, index_path: Path) -> Callable[..., Settings]:
    """Factory for Settings pointing at temp paths."""

    def _make(
        embedding_model: str = "model-a",
        top_k: int = 4,
        memory_enabled: bool = True,
        max_messages: int = 20,
        chunk_size: int = 1000,
    ) -> Settings:
        return Settings(
            system_prompt="You are a test assistant.",
            gemini=GeminiSettings(google_api_key="test-key", embedding_model=embedding_model),
            retrieval=RetrievalSettings(
                index_path=str(index_path),
                top_k=top_k,
                chunk_size=chunk_size,
                chunk_overlap=0,
            ),
            memory=MemorySettings(
                enabled=memory_enabled,
                max_messages=max_messages,
                dir=str(tmp_path / "memory"),
            ),
        )

    return _make


@pytest.fixture
def settings(make_settings: Callable[..., Settings]) -> Settings:
    """Default isolated settings (embedding model 'model-a')."""
    return make_settings()


def _chunk(source: str, text: str, embedding: list[float]) -> StoredChunk:
    return StoredChunk.create(source=source, text=text, embedding=embedding)


@pytest.fixture
def make_chunk() -> Callable[[str, str, list[float]], StoredChunk]:
    """Build a stored chunk with its content-addressed ID."""
    return _chunk


@pytest.fixture
def stub_embeddings_cls() -> type[StubEmbeddings]:
    """StubEmbeddings class, for tests that need custom vectors."""
    return StubEmbeddings


@pytest.fixture
def sample_index() -> StoredIndex:
    """Five two-dimensional chunks at known angles from [1, 0]."""
    chunks = [
        _chunk("docs/a.md", "alpha", [1.0, 0.0]),
        _chunk("docs/b.md", "beta", [0.0, 1.0]),
        _chunk("docs/c.md", "gamma", [0.8, 0.6]),
        _chunk("docs/d.md", "delta", [-1.0, 0.0]),
        _chunk("docs/e.md", "epsilon", [0.6, 0.8]),
    ]
    return StoredIndex(embedding_model="model-a", embedding_dimension=2, chunks=chunks)
