"""Test configuration and messages."""

import importlib

import pytest
from pydantic import ValidationError

from sentence_snippets.core.config import Settings, SnippetConfig
from sentence_snippets.i18n.messages import MESSAGES, get_message


class TestSnippetConfig:
    """Test ranking parameters."""

    def test_defaults(self):
        """Should default to 5 tokens, 3 sentences and 60 characters."""
        config = SnippetConfig()
        assert config.max_tokens == 5
        assert config.max_sentences == 3
        assert config.benchmark_length == 60
        assert config.separator == " ... "
        assert config.candidates_per_token == 6

    @pytest.mark.parametrize(
        "field, value",
        [
            ("max_tokens", 0),
            ("max_sentences", 0),
            ("candidate_factor", 0),
            ("benchmark_length", 0),
        ],
    )
    def test_rejects_invalid(self, field, value):
        """Should reject non-positive limits."""
        with pytest.raises(ValidationError):
            SnippetConfig(**{field: value})

    def test_frozen(self):
        """Should not allow changes after creation."""
        config = SnippetConfig()
        with pytest.raises(ValidationError):
            config.max_tokens = 10


class TestSettings:
    """Test environment settings."""

    def test_defaults(self):
        """Should build the default SnippetConfig."""
        assert Settings().snippet_config() == SnippetConfig()

    def test_from_env(self, monkeypatch):
        """Should read limits from the environment."""
        monkeypatch.setenv("SNIPPET_MAX_SENTENCES", "2")
        monkeypatch.setenv("SNIPPET_LANG", "ru")

        from sentence_snippets.core import config

        try:
            importlib.reload(config)
            assert config.settings.MAX_SENTENCES == 2
            assert config.settings.LANGUAGE == "ru"
            assert config.settings.snippet_config().max_sentences == 2
        finally:
            monkeypatch.undo()
            importlib.reload(config)

    def test_invalid_env_value(self, monkeypatch):
        """Should fail validation for a zero limit."""
        settings = Settings()
        monkeypatch.setattr(settings, "MAX_TOKENS", 0)
        with pytest.raises(ValidationError):
            settings.snippet_config()


class TestMessages:
    """Test message lookup."""

    def test_languages_share_keys(self):
        """Should define the same keys in every language."""
        keys = set(MESSAGES["en"])
        for table in MESSAGES.values():
            assert set(table) == keys

    def test_lookup(self):
        """Should return the message in the requested language."""
        assert get_message("no_results", "ru") == "По вашему запросу ничего не найдено"

    def test_fallback(self):
        """Should fall back to English for unknown languages."""
        assert get_message("empty_query", "xx") == MESSAGES["en"]["empty_query"]
        assert get_message("empty_query") == MESSAGES["en"]["empty_query"]
