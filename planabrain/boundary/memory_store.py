"""
Per-user conversation memory stored as JSON files.

One file per user under the memory directory, bounded to the most recent
messages. A missing file means no prior memory.

Dependencies: json, pathlib, re, time, planabrain.models.memory
System role: Chat history persistence for the web-search answer path
"""

import json
import logging
import os
import re
import time
from pathlib import Path
from typing import Any

from planabrain.models.memory import StoredChatFile, StoredChatMessage

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_-]")
MAX_USER_ID_LENGTH = 200


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


def safe_user_id(user_id: str) -> str:
    """
    Normalize a user ID into a safe file name stem.

    Args:
        user_id: Raw user identifier

    Returns:
        str: ID restricted to [A-Za-z0-9_-], at most 200 characters,
            "default" when nothing usable remains
    """
    trimmed = user_id.strip()
    if not trimmed:
        return "default"
    return _UNSAFE_CHARS.sub("_", trimmed)[:MAX_USER_ID_LENGTH] or "default"


def user_memory_file_path(memory_dir: str | os.PathLike[str], user_id: str) -> Path:
    """Return the memory file path for a user."""
    return Path(memory_dir) / f"{safe_user_id(user_id)}.json"


def _normalize_message(raw: Any) -> StoredChatMessage | None:
    if not isinstance(raw, dict) or not isinstance(raw.get("content"), str):
        return None
    content = raw["content"]
    if not content.strip():
        return None
    role = "ai" if raw.get("role") == "ai" else "human"
    at = raw.get("at")
    if isinstance(at, bool) or not isinstance(at, (int, float)):
        at = now_ms()
    return StoredChatMessage(role=role, content=content, at=int(at))


def load_user_memory(
    memory_dir: str | os.PathLike[str],
    user_id: str,
    max_messages: int,
) -> list[StoredChatMessage]:
    """
    Load the most recent remembered messages for a user.

    Malformed entries are dropped; unknown roles are read as "human".

    Args:
        memory_dir: Directory holding per-user memory files
        user_id: User identifier
        max_messages: Maximum number of messages to return

    Returns:
        list[StoredChatMessage]: Oldest-first messages, at most max_messages
    """
    file_path = user_memory_file_path(memory_dir, user_id)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []

    parsed = json.loads(raw)
    entries = parsed.get("messages") if isinstance(parsed, dict) else None
    if not isinstance(entries, list):
        entries = []

    messages = [m for m in (_normalize_message(e) for e in entries) if m is not None]

    if max_messages <= 0:
        return []
    return messages[-max_messages:]


def append_user_memory(
    memory_dir: str | os.PathLike[str],
    user_id: str,
    max_messages: int,
    messages: list[StoredChatMessage],
) -> None:
    """
    Append messages to a user's memory, keeping only the newest max_messages.

    Args:
        memory_dir: Directory holding per-user memory files
        user_id: User identifier
        max_messages: Maximum number of messages kept on disk
        messages: New messages, oldest first
    """
    existing = load_user_memory(memory_dir, user_id, max(0, max_messages))
    combined = [m for m in [*existing, *messages] if m.content.strip()]
    kept = combined[-max_messages:] if max_messages > 0 else []

    directory = Path(memory_dir)
    directory.mkdir(parents=True, exist_ok=True)
    file_path = user_memory_file_path(directory, user_id)
    document = StoredChatFile(messages=kept)
    file_path.write_text(
        json.dumps(document.model_dump(), ensure_ascii=False, separators=(",", ":")),
        encoding="utf-8",
    )
    logger.debug(f"{__name__}:append_user_memory - kept {len(kept)} messages in {file_path}")


def reset_user_memory(memory_dir: str | os.PathLike[str], user_id: str) -> bool:
    """
    Delete a user's memory file.

    Args:
        memory_dir: Directory holding per-user memory files
        user_id: User identifier

    Returns:
        bool: True when a file existed and was removed
    """
    file_path = user_memory_file_path(memory_dir, user_id)
    try:
        file_path.unlink()
    except FileNotFoundError:
        return False
    logger.info(f"{__name__}:reset_user_memory - removed {file_path}")
    return True
