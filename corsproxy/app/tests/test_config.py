import pytest
from pydantic import ValidationError

from corsproxy.app.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # keep a developer's .env and shell out of the way
    monkeypatch.chdir(tmp_path)
    for name in ["PORT", "HOST", "LOG_LEVEL", "UPSTREAM_TIMEOUT", "FOLLOW_REDIRECTS"]:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings()

    assert settings.PORT == 3000
    assert settings.HOST == "0.0.0.0"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.UPSTREAM_TIMEOUT is None
    assert settings.FOLLOW_REDIRECTS is True
    assert settings.local_url == "http://localhost:3000"


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8081")

    assert get_settings().PORT == 8081


def test_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("PORT=4000\nUPSTREAM_TIMEOUT=12\n")

    settings = Settings()

    assert settings.PORT == 4000
    assert settings.UPSTREAM_TIMEOUT == 12.0


def test_log_level_is_normalised(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings().LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    "name,value",
    [
        ("PORT", "0"),
        ("PORT", "70000"),
        ("PORT", "abc"),
        ("LOG_LEVEL", "LOUD"),
        ("UPSTREAM_TIMEOUT", "-1"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
