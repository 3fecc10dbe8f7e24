import pytest

from relieflink.core.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = get_settings()

    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    settings = get_settings()

    assert settings.log_level == "WARNING"


def test_unknown_environment_keys_ignored(monkeypatch):
    monkeypatch.setenv("APP_ENV", "field")

    settings = get_settings()

    assert not hasattr(settings, "app_env")


def test_settings_are_cached():
    assert get_settings() is get_settings()
