import pytest
from pydantic import ValidationError

from bowling.settings import BowlingSettings, ServerSettings, get_settings


def test_defaults(monkeypatch):
    for name in ("BOWLING_LOG_LEVEL", "BOWLING_LOG_FILE", "BOWLING_SHOW_EXAMPLE"):
        monkeypatch.delenv(name, raising=False)

    settings = BowlingSettings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.show_example is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BOWLING_LOG_LEVEL", "debug")
    monkeypatch.setenv("BOWLING_LOG_FILE", "lane.jsonl")
    monkeypatch.setenv("BOWLING_SHOW_EXAMPLE", "true")

    settings = BowlingSettings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "lane.jsonl"
    assert settings.show_example is True


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("BOWLING_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        BowlingSettings(_env_file=None)


def test_server_settings(monkeypatch):
    monkeypatch.setenv("BOWLING_SERVER_PORT", "9001")

    settings = ServerSettings(_env_file=None)
    assert settings.host == "127.0.0.1"
    assert settings.port == 9001


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
