import pytest
from pydantic import ValidationError

from pdf_content.config.settings import Settings, load_settings


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def test_defaults_are_deterministic(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)

    settings = Settings(_env_file=None)

    assert settings.port == 5000
    assert settings.log_level == "INFO"


def test_env_overrides_port_and_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.log_level == "debug"


@pytest.mark.parametrize("port", ["0", "-1", "not-a-port"])
def test_invalid_port_raises_validation_error(
    monkeypatch: pytest.MonkeyPatch,
    port: str,
) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("PORT", port)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_unrelated_env_vars_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///ignored.db")

    settings = Settings(_env_file=None)

    assert settings.port == 5000


def test_load_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    load_settings.cache_clear()
    try:
        assert load_settings() is load_settings()
    finally:
        load_settings.cache_clear()
