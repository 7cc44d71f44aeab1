"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from tickerlens.core.config import Settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("MAX_MESSAGE_LENGTH", raising=False)
        monkeypatch.delenv("EXTRA_ALIASES", raising=False)
        settings = Settings(_env_file=None)
        assert settings.project_name == "TickerLens"
        assert settings.log_level == "INFO"
        assert settings.max_message_length == 2000
        assert settings.extra_aliases == {}

    def test_extra_aliases_from_environment(self, monkeypatch):
        """Aliases are read as JSON and normalized."""
        monkeypatch.setenv("EXTRA_ALIASES", '{" Palantir ": "pltr", "": "X"}')
        settings = Settings(_env_file=None)
        assert settings.extra_aliases == {"palantir": "PLTR"}

    def test_max_message_length_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(max_message_length=0)
