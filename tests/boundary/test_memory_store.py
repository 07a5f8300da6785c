"""Tests for per-user conversation memory files."""

import json
from pathlib import Path

import pytest

from planabrain.boundary.memory_store import (
    append_user_memory,
    load_user_memory,
    reset_user_memory,
    safe_user_id,
    user_memory_file_path,
)
from planabrain.models import StoredChatMessage


def _msg(role: str, content: str, at: int = 1) -> StoredChatMessage:
    return StoredChatMessage(role=role, content=content, at=at)


class TestSafeUserId:
    """Test user ID normalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("alice", "alice"),
            ("  bob_1-x  ", "bob_1-x"),
            ("telegram:12345", "telegram_12345"),
            ("../../etc/passwd", "______etc_passwd"),
            ("", "default"),
            ("   ", "default"),
        ],
    )
    def test_normalizes(self, raw: str, expected: str) -> None:
        """Should restrict IDs to safe file name characters."""
        assert safe_user_id(raw) == expected

    def test_truncates_long_ids(self) -> None:
        """Should cap IDs at 200 characters."""
        assert len(safe_user_id("x" * 500)) == 200

    def test_file_path_uses_safe_id(self, tmp_path: Path) -> None:
        """Should place the file under the memory dir with a .json suffix."""
        assert user_memory_file_path(tmp_path, "a b") == tmp_path / "a_b.json"


class TestLoadUserMemory:
    """Test load_user_memory normalization and bounds."""

    def test_missing_file_returns_empty(self, tmp_path: Path) -> None:
        """Should treat a missing file as no memory."""
        assert load_user_memory(tmp_path / "memory", "nobody", 20) == []

    def test_returns_most_recent(self, tmp_path: Path) -> None:
        """Should return only the newest max_messages."""
        append_user_memory(
            tmp_path, "u", 10, [_msg("human", f"m{i}", i) for i in range(6)]
        )

        messages = load_user_memory(tmp_path, "u", 3)

        assert [m.content for m in messages] == ["m3", "m4", "m5"]

    def test_zero_max_returns_empty(self, tmp_path: Path) -> None:
        """Should return nothing when max_messages <= 0."""
        append_user_memory(tmp_path, "u", 10, [_msg("human", "hi")])

        assert load_user_memory(tmp_path, "u", 0) == []
        assert load_user_memory(tmp_path, "u", -3) == []

    def test_drops_malformed_entries(self, tmp_path: Path) -> None:
        """Should skip non-dict, non-string and blank entries and fix roles."""
        (tmp_path / "u.json").write_text(
            json.dumps({
                "version": 1,
                "messages": [
                    "junk",
                    {"role": "ai", "content": 42},
                    {"role": "ai", "content": "   "},
                    {"role": "system", "content": "kept as human", "at": 5},
                    {"role": "ai", "content": "answer"},
                ],
            }),
            encoding="utf-8",
        )

        messages = load_user_memory(tmp_path, "u", 20)

        assert [(m.role, m.content) for m in messages] == [
            ("human", "kept as human"),
            ("ai", "answer"),
        ]
        assert messages[0].at == 5
        assert messages[1].at > 0

    def test_missing_messages_list(self, tmp_path: Path) -> None:
        """Should treat a document without messages as empty."""
        (tmp_path / "u.json").write_text(json.dumps({"version": 1}), encoding="utf-8")

        assert load_user_memory(tmp_path, "u", 20) == []


class TestAppendUserMemory:
    """Test append_user_memory bounds and file format."""

    def test_creates_directory_and_file(self, tmp_path: Path) -> None:
        """Should write a versioned document."""
        memory_dir = tmp_path / "memory"

        append_user_memory(memory_dir, "u", 20, [_msg("human", "q", 1), _msg("ai", "a", 2)])

        data = json.loads((memory_dir / "u.json").read_text(encoding="utf-8"))
        assert data == {
            "version": 1,
            "messages": [
                {"role": "human", "content": "q", "at": 1},
                {"role": "ai", "content": "a", "at": 2},
            ],
        }

    def test_keeps_only_newest(self, tmp_path: Path) -> None:
        """Should trim the stored history to max_messages."""
        for i in range(3):
            append_user_memory(
                tmp_path, "u", 4, [_msg("human", f"q{i}"), _msg("ai", f"a{i}")]
            )

        messages = load_user_memory(tmp_path, "u", 100)

        assert [m.content for m in messages] == ["q1", "a1", "q2", "a2"]

    def test_skips_blank_messages(self, tmp_path: Path) -> None:
        """Should not store blank content."""
        append_user_memory(tmp_path, "u", 10, [_msg("human", " "), _msg("ai", "a")])

        assert [m.content for m in load_user_memory(tmp_path, "u", 10)] == ["a"]

    def test_zero_max_writes_empty_history(self, tmp_path: Path) -> None:
        """Should store no messages when max_messages is 0."""
        append_user_memory(tmp_path, "u", 0, [_msg("human", "q")])

        data = json.loads((tmp_path / "u.json").read_text(encoding="utf-8"))
        assert data["messages"] == []

    def test_users_are_isolated(self, tmp_path: Path) -> None:
        """Should keep separate files per user."""
        append_user_memory(tmp_path, "alice", 10, [_msg("human", "from alice")])
        append_user_memory(tmp_path, "bob", 10, [_msg("human", "from bob")])

        assert [m.content for m in load_user_memory(tmp_path, "alice", 10)] == ["from alice"]
        assert [m.content for m in load_user_memory(tmp_path, "bob", 10)] == ["from bob"]


class TestResetUserMemory:
    """Test reset_user_memory."""

    def test_removes_existing_file(self, tmp_path: Path) -> None:
        """Should delete the file and report True."""
        append_user_memory(tmp_path, "u", 10, [_msg("human", "q")])

        assert reset_user_memory(tmp_path, "u") is True
        assert load_user_memory(tmp_path, "u", 10) == []

    def test_missing_file_returns_false(self, tmp_path: Path) -> None:
        """Should report False when there was nothing to delete."""
        assert reset_user_memory(tmp_path, "ghost") is False
