"""Tests for pydantic-settings configuration and client factories."""

import os

import pytest

from planabrain.boundary.gemini import create_chat_model, create_embeddings
from planabrain.configs import GeminiSettings, MemorySettings, RetrievalSettings, Settings, get_settings
from planabrain.core.exceptions import ConfigurationError
from planabrain.core.prompts import DEFAULT_SYSTEM_PROMPT


class TestDefaults:
    """Test default configuration values."""

    def test_settings_defaults(self) -> None:
        """Should match the documented defaults."""
        settings = Settings()

        assert settings.system_prompt == DEFAULT_SYSTEM_PROMPT
        assert settings.user_id == "cli"
        assert settings.log_level == "WARNING"
        assert "environment" not in Settings.model_fields
        assert settings.gemini.model == "gemini-3-flash-preview"
        assert settings.gemini.embedding_model == "gemini-embedding-001"
        assert settings.gemini.temperature == 1.0
        assert settings.gemini.google_api_key is None
        assert settings.retrieval.index_path == ".planabrain/index.json"
        assert settings.retrieval.chunk_size == 1000
        assert settings.retrieval.chunk_overlap == 150
        assert settings.retrieval.top_k == 4
        assert settings.memory.enabled is True
        assert settings.memory.max_messages == 20

    def test_memory_dir_follows_index(self) -> None:
        """Should place memory beside the index by default."""
        settings = Settings(retrieval=RetrievalSettings(index_path="data/idx/index.json"))

        assert settings.memory.dir == os.path.join("data/idx", "memory")

    def test_explicit_memory_dir_wins(self) -> None:
        """Should keep a configured memory directory."""
        settings = Settings(memory=MemorySettings(dir="elsewhere"))

        assert settings.memory.dir == "elsewhere"


class TestEnvironmentOverrides:
    """Test environment variable loading."""

    def test_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read PLANABRAIN_* variables into nested settings."""
        monkeypatch.setenv("PLANABRAIN_INDEX_PATH", "custom/index.json")
        monkeypatch.setenv("PLANABRAIN_TOP_K", "7")
        monkeypatch.setenv("PLANABRAIN_GEMINI_MODEL", "gemini-other")
        monkeypatch.setenv("PLANABRAIN_GEMINI_EMBEDDING_MODEL", "embed-other")
        monkeypatch.setenv("PLANABRAIN_SYSTEM_PROMPT", "Be brief.")
        monkeypatch.setenv("PLANABRAIN_USER_ID", "someone")

        settings = Settings()

        assert settings.retrieval.index_path == "custom/index.json"
        assert settings.retrieval.top_k == 7
        assert settings.gemini.model == "gemini-other"
        assert settings.gemini.embedding_model == "embed-other"
        assert settings.system_prompt == "Be brief."
        assert settings.user_id == "someone"
        assert settings.memory.dir == os.path.join("custom", "memory")

    @pytest.mark.parametrize("name", ["GOOGLE_API_KEY", "GEMINI_API_KEY"])
    def test_api_key_aliases(self, monkeypatch: pytest.MonkeyPatch, name: str) -> None:
        """Should accept either API key variable."""
        monkeypatch.setenv(name, "secret")

        assert GeminiSettings().google_api_key == "secret"

    def test_dotenv_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should read a .env file in the working directory."""
        (tmp_path / ".env").write_text("PLANABRAIN_TOP_K=9\n", encoding="utf-8")

        assert RetrievalSettings().top_k == 9

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("5", 5), ("abc", 0), ("-5", 0)],
    )
    def test_max_messages_parsing(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
        """Should clamp unparsable or negative limits to zero."""
        monkeypatch.setenv("PLANABRAIN_MEMORY_MAX_MESSAGES", raw)

        assert MemorySettings().max_messages == expected

    @pytest.mark.parametrize("raw", ["0", "false", "FALSE"])
    def test_memory_disabled(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        """Should disable memory for falsy values."""
        monkeypatch.setenv("PLANABRAIN_MEMORY_ENABLED", raw)

        assert MemorySettings().enabled is False

    @pytest.mark.parametrize("raw", ["1", "true", "enabled", "yes", "off", ""])
    def test_memory_enabled_for_other_values(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        """Should keep memory on for any value other than 0 or false."""
        monkeypatch.setenv("PLANABRAIN_MEMORY_ENABLED", raw)

        assert MemorySettings().enabled is True

    def test_unrecognised_enabled_does_not_break_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should still build the full settings for an unusual flag value."""
        monkeypatch.setenv("PLANABRAIN_MEMORY_ENABLED", "enabled")

        assert Settings().memory.enabled is True

    def test_invalid_top_k_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should reject a non-positive top_k."""
        monkeypatch.setenv("PLANABRAIN_TOP_K", "0")

        with pytest.raises(ValueError):
            RetrievalSettings()


class TestGetSettings:
    """Test the cached settings accessor."""

    def test_cached(self) -> None:
        """Should return the same instance until the cache is cleared."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestClientFactories:
    """Test Gemini client factories."""

    def test_embeddings_require_key(self) -> None:
        """Should raise ConfigurationError without an API key."""
        with pytest.raises(ConfigurationError) as exc_info:
            create_embeddings(GeminiSettings())

        assert "GOOGLE_API_KEY" in exc_info.value.message

    def test_chat_model_requires_key(self) -> None:
        """Should raise ConfigurationError without an API key."""
        with pytest.raises(ConfigurationError):
            create_chat_model(GeminiSettings())
