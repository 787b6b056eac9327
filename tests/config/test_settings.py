"""Tests for config/settings.py."""

import pytest
from pydantic import ValidationError

from config.settings import DEFAULT_ANIMAL, Settings, get_settings


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in (
        "ASK_AND_LEARN_DEFAULT_ANIMAL",
        "ASK_AND_LEARN_JSON_INDENT",
        "ASK_AND_LEARN_LOG_FILE",
        "ASK_AND_LEARN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.default_animal == DEFAULT_ANIMAL == "platypus"
    assert settings.json_indent == 4
    assert settings.log_file is None
    assert settings.log_level == "DEBUG"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ASK_AND_LEARN_DEFAULT_ANIMAL", " aardvark ")
    monkeypatch.setenv("ASK_AND_LEARN_JSON_INDENT", "2")
    monkeypatch.setenv("ASK_AND_LEARN_LOG_FILE", "/tmp/game.log")
    monkeypatch.setenv("ASK_AND_LEARN_LOG_LEVEL", "info")

    settings = Settings(_env_file=None)

    assert settings.default_animal == "aardvark"
    assert settings.json_indent == 2
    assert settings.log_file == "/tmp/game.log"
    assert settings.log_level == "INFO"


def test_empty_log_file_means_none(monkeypatch):
    monkeypatch.setenv("ASK_AND_LEARN_LOG_FILE", "")
    assert Settings(_env_file=None).log_file is None


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ASK_AND_LEARN_DEFAULT_ANIMAL=wombat\n", encoding="utf-8")
    assert Settings(_env_file=env_file).default_animal == "wombat"


@pytest.mark.parametrize(
    "name,value",
    [
        ("ASK_AND_LEARN_DEFAULT_ANIMAL", "   "),
        ("ASK_AND_LEARN_JSON_INDENT", "-1"),
        ("ASK_AND_LEARN_LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_cached():
    assert get_settings() is get_settings()
