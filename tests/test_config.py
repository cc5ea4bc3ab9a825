import pytest
from pydantic import ValidationError

from mastermind.config import Settings, load_settings


def test_defaults():
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.random_source == "local"
    assert settings.delimiter == "-"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MASTERMIND_LOG_LEVEL", "debug")
    monkeypatch.setenv("MASTERMIND_RANDOM_SOURCE", "random.org")
    monkeypatch.setenv("MASTERMIND_DELIMITER", ",")

    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.random_source == "random.org"
    assert settings.delimiter == ","


@pytest.mark.parametrize("field,value", [
    ("log_level", "chatty"),
    ("random_source", "dice"),
    ("delimiter", ""),
    ("delimiter", " "),
    ("delimiter", "--"),
])
def test_bad_settings_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_load_settings_reads_dotenv(monkeypatch):
    calls = []

    def fake_load_dotenv(*args, **kwargs):
        calls.append(True)
        monkeypatch.setenv("MASTERMIND_DELIMITER", "/")
        return True

    monkeypatch.setattr("mastermind.config.load_dotenv", fake_load_dotenv)

    assert load_settings().delimiter == "/"
    assert calls == [True]
