"""
Source directory loading using LangChain DirectoryLoader.

Loads every text-like file under a directory as a LangChain Document.
Files with other extensions are skipped.

Dependencies: langchain_community.document_loaders
System role: First stage of the ingestion pipeline
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from langchain_community.document_loaders import DirectoryLoader, TextLoader
from langchain_core.documents import Document

from planabrain.core.exceptions import SourceDirectoryNotFoundError

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS: tuple[str, ...] = (
    ".md",
    ".txt",
    ".ts",
    ".tsx",
    ".js",
    ".jsx",
    ".json",
    ".rs",
    ".py",
    ".toml",
    ".yaml",
    ".yml",
)


class LenientTextLoader(TextLoader):
    """TextLoader that decodes undecodable bytes as U+FFFD instead of failing."""

    def lazy_load(self) -> Iterator[Document]:
        text = Path(self.file_path).read_text(
            encoding=self.encoding or "utf-8",
            errors="replace",
        )
        yield Document(page_content=text, metadata={"source": str(self.file_path)})


class SourceDirectoryLoader:
    """Load text and code files from a directory tree."""

    def __init__(self, extensions: tuple[str, ...] = SOURCE_EXTENSIONS) -> None:
        """
        Initialize loader.

        Args:
            extensions: Lower-case file suffixes to load
        """
        self._extensions = extensions

    def load(self, source_dir: str) -> list[Document]:
        """
        Load all matching files under source_dir.

        Args:
            source_dir: Directory to scan recursively

        Returns:
            list[Document]: One document per file, metadata["source"] set to the path

        Raises:
            SourceDirectoryNotFoundError: When source_dir is not a directory
        """
        if not Path(source_dir).is_dir():
            raise SourceDirectoryNotFoundError(source_dir)

        documents: list[Document] = []
        for extension in self._extensions:
            loader = DirectoryLoader(
                source_dir,
                glob=f"**/*{extension}",
                loader_cls=LenientTextLoader,
                loader_kwargs={"encoding": "utf-8"},
                silent_errors=False,
            )
            documents.extend(loader.load())

        documents.sort(key=lambda d: str(d.metadata.get("source", "")))
        logger.info(f"{__name__}:load - loaded {len(documents)} files from {source_dir}")
        return documents
