"""
Settings Tests
==============
"""

import pytest
from pydantic import ValidationError

from replayreader.config import ReaderSettings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("REPLAY_MAX_FRAME_LENGTH", "REPLAY_STRING_ENCODING", "REPLAY_STRING_ERRORS", "REPLAY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestReaderSettings:
    def test_defaults(self):
        settings = load_settings()

        assert settings.max_frame_length is None
        assert settings.string_encoding == "utf-8"
        assert settings.string_errors == "replace"
        assert settings.log_level == "INFO"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("REPLAY_MAX_FRAME_LENGTH", "4096")
        monkeypatch.setenv("REPLAY_LOG_LEVEL", "debug")

        settings = load_settings()
        assert settings.max_frame_length == 4096
        assert settings.log_level == "DEBUG"

    def test_empty_environment_value_is_ignored(self, monkeypatch):
        monkeypatch.setenv("REPLAY_MAX_FRAME_LENGTH", "")

        assert load_settings().max_frame_length is None

    def test_overrides_beat_environment(self, monkeypatch):
        monkeypatch.setenv("REPLAY_STRING_ENCODING", "latin-1")

        assert load_settings(string_encoding="ascii").string_encoding == "ascii"

    def test_rejects_negative_limit(self):
        with pytest.raises(ValidationError):
            ReaderSettings(max_frame_length=-1)

    def test_rejects_unknown_encoding(self):
        with pytest.raises(ValidationError):
            ReaderSettings(string_encoding="no-such-codec")

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("REPLAY_LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            load_settings()
