import logging

from follow_manager.config import DEFAULT_REMOTE_TIMEOUT, load_settings
from follow_manager.logging_config import LOGGER_NAME, resolve_level, setup_logging


def test_load_settings(monkeypatch):
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "abc123")
    for name in (
        "FOLLOW_DATA_DIR",
        "FOLLOW_REMOTE_URL",
        "FOLLOW_REMOTE_TIMEOUT",
        "FOLLOW_LANGUAGE",
        "FOLLOW_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    s = load_settings()
    assert s.token == "abc123"
    assert s.data_dir == "follow_data"
    assert s.remote_url == ""
    assert s.remote_timeout == DEFAULT_REMOTE_TIMEOUT
    assert s.language == "en"
    assert s.log_level == "INFO"

    # empty token environment
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "")
    s2 = load_settings()
    assert s2.token == ""


def test_load_settings_overrides(monkeypatch):
    monkeypatch.setenv("FOLLOW_DATA_DIR", "/var/lib/follow")
    monkeypatch.setenv("FOLLOW_REMOTE_URL", " https://analysis.example ")
    monkeypatch.setenv("FOLLOW_REMOTE_TIMEOUT", "12.5")
    monkeypatch.setenv("FOLLOW_LANGUAGE", "KO")
    monkeypatch.setenv("FOLLOW_LOG_LEVEL", " debug ")
    s = load_settings()
    assert s.data_dir == "/var/lib/follow"
    assert s.remote_url == "https://analysis.example"
    assert s.remote_timeout == 12.5
    assert s.language == "ko"
    assert s.log_level == "DEBUG"


def test_invalid_timeout_falls_back(monkeypatch):
    for raw in ("soon", "-3", "0"):
        monkeypatch.setenv("FOLLOW_REMOTE_TIMEOUT", raw)
        assert load_settings().remote_timeout == DEFAULT_REMOTE_TIMEOUT


def test_setup_logging_idempotent():
    logger1 = setup_logging(logging.DEBUG)
    logger2 = setup_logging(logging.DEBUG)
    assert logger1 is logger2
    assert logger1.name == "follow_manager"
    assert logger1.handlers  # at least one handler installed


def test_resolve_level_accepts_names():
    assert resolve_level(None) == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level(" debug ") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING
    assert resolve_level("chatty") == logging.INFO


def test_setup_logging_changes_level_without_new_handlers():
    logger = setup_logging()
    count = len(logger.handlers)
    try:
        assert setup_logging("warning") is logger
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == count
        setup_logging()
        assert logger.level == logging.WARNING
    finally:
        logging.getLogger(LOGGER_NAME).setLevel(logging.INFO)
