"""
Local JSON persistence for the vector index.

Saves and loads the whole index as one compact JSON document. Saves
replace the previous file atomically; loads validate the format version
and schema but not embedding dimensions.

Dependencies: json, pathlib, tempfile, pydantic, planabrain.models
System role: Sole owner of the on-disk index representation
"""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from planabrain.core.exceptions import (
    IndexNotFoundError,
    InvalidIndexError,
    UnsupportedIndexVersionError,
)
from planabrain.models.index import INDEX_VERSION, StoredIndex

logger = logging.getLogger(__name__)


def _file_mode(target: Path) -> int:
    """Mode for the saved index: the current file's mode, else 0o666 minus umask."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def serialize_index(index: StoredIndex) -> dict[str, Any]:
    """
    Convert StoredIndex to its JSON-serializable wire form.

    Args:
        index: Index model instance

    Returns:
        dict: camelCase document; embeddingDimension omitted when unknown
    """
    return index.model_dump(by_alias=True, exclude_none=True)


def save_index(path: str | os.PathLike[str], index: StoredIndex) -> None:
    """
    Write the index to path, replacing any existing file.

    Parent directories are created as needed. The document is written to a
    sibling temporary file first and moved into place.

    Args:
        path: Index file path
        index: Index to persist

    Raises:
        OSError: When the file cannot be written
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    payload = json.dumps(serialize_index(index), ensure_ascii=False, separators=(",", ":"))

    mode = _file_mode(target)
    fd, tmp_name = tempfile.mkstemp(
        dir=target.parent,
        prefix=f".{target.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info(
        f"{__name__}:save_index - wrote {len(index.chunks)} chunks "
        f"(model={index.embedding_model}) to {target}"
    )


def load_index(path: str | os.PathLike[str]) -> StoredIndex:
    """
    Read and validate the index at path.

    Args:
        path: Index file path

    Returns:
        StoredIndex: Parsed index

    Raises:
        IndexNotFoundError: When no file exists at path
        UnsupportedIndexVersionError: When version is not the supported one
        InvalidIndexError: When the document is not a valid index
    """
    target = Path(path)
    try:
        raw = target.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise IndexNotFoundError(str(path)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidIndexError(f"Index file is not valid JSON: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise InvalidIndexError("Index file must contain a JSON object.", str(path))

    version = data.get("version")
    if isinstance(version, bool) or version != INDEX_VERSION:
        raise UnsupportedIndexVersionError(version, str(path))

    try:
        index = StoredIndex.model_validate(data)
    except ValidationError as e:
        raise InvalidIndexError(
            f"Index file failed schema validation ({e.error_count()} errors).",
            str(path),
        ) from e

    logger.debug(f"{__name__}:load_index - loaded {len(index.chunks)} chunks from {target}")
    return index
