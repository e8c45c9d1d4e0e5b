import logging

import pytest

from progression.modules.entities.infrastructure.settings import DEFAULT_DB_PATH, Settings


def test_defaults_when_env_is_empty(monkeypatch):
    for var in ("PROGRESSION_DB", "PROGRESSION_LOG_LEVEL", "PROGRESSION_LOG_FILE", "LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings.from_env()

    assert settings.db_path == DEFAULT_DB_PATH
    assert settings.log_level_value == logging.INFO
    assert settings.pretty_logs is False


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PROGRESSION_DB", str(tmp_path / "db.json"))
    monkeypatch.setenv("PROGRESSION_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "PRETTY")

    settings = Settings.from_env()

    assert settings.db_path.endswith("db.json")
    assert settings.log_level_value == logging.DEBUG
    assert settings.pretty_logs is True


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValueError):
        Settings(log_level="LOUD")
