import pytest
from pydantic import ValidationError

from taxapp.config import DEFAULT_GEOLOCATION_URL, Settings, get_settings


def test_defaults(monkeypatch):
    for key in ("TAX_YEAR", "GEOLOCATION_URL", "HTTP_TIMEOUT", "LOG_LEVEL", "TELEMETRY_LOG_DIR"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings()
    assert settings.tax_year == 2024
    assert settings.geolocation_url == DEFAULT_GEOLOCATION_URL
    assert settings.http_timeout == 10
    assert settings.log_level == "INFO"
    assert settings.telemetry_log_dir is None


def test_env_parsing(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("TELEMETRY_LOG_DIR", "/tmp/taxapp-logs")
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.http_timeout == 2.5
    assert settings.telemetry_log_dir == "/tmp/taxapp-logs"
    get_settings.cache_clear()


def test_unsupported_tax_year_rejected(monkeypatch):
    monkeypatch.setenv("TAX_YEAR", "2019")
    with pytest.raises(ValidationError, match="TAX_YEAR"):
        Settings()


def test_bad_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings()


def test_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_settings_are_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
