"""Environment-driven configuration helpers."""

import pytest

from beerstock.core import config


def test_database_url_defaults_to_local_sqlite_file(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    assert config.get_database_url() == "sqlite:///./beerstock.db"


def test_database_url_reads_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://beer:secret@db:5432/beerstock")

    assert config.get_database_url() == "postgresql://beer:secret@db:5432/beerstock"


@pytest.mark.parametrize(
    "env, expected",
    [("production", True), ("development", False), ("staging", False)],
)
def test_is_production(monkeypatch, env, expected):
    monkeypatch.setenv("FLASK_ENV", env)

    assert config.is_production() is expected


def test_log_level_defaults_by_environment(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    monkeypatch.setenv("FLASK_ENV", "production")
    assert config.get_log_level() == "INFO"

    monkeypatch.setenv("FLASK_ENV", "development")
    assert config.get_log_level() == "DEBUG"


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " warning ")

    assert config.get_log_level() == "WARNING"


def test_invalid_log_level_falls_back_to_default(monkeypatch):
    monkeypatch.delenv("FLASK_ENV", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    assert config.get_log_level() == "DEBUG"


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("true", True), ("YES", True), ("0", False), ("false", False), ("", False)],
)
def test_rate_limit_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("RATE_LIMIT_ENABLED", raw)

    assert config.get_rate_limit_enabled() is expected


def test_flags_default_to_enabled(monkeypatch):
    monkeypatch.delenv("RATE_LIMIT_ENABLED", raising=False)
    monkeypatch.delenv("LOG_TO_FILE", raising=False)

    assert config.get_rate_limit_enabled() is True
    assert config.get_log_to_file() is True


def test_limiter_storage_uri_defaults_to_memory(monkeypatch):
    monkeypatch.delenv("LIMITER_STORAGE_URI", raising=False)

    assert config.get_limiter_storage_uri() == "memory://"


def test_mask_url_password_hides_credentials():
    masked = config._mask_url_password("postgresql://beer:secret@db:5432/beerstock")

    assert masked == "postgresql://beer:***@db:5432/beerstock"
    assert config._mask_url_password("sqlite:///:memory:") == "sqlite:///:memory:"


def test_load_environment_skips_dotenv_when_database_url_set(monkeypatch):
    calls = []
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setattr(config, "load_dotenv", lambda: calls.append(True))

    config.load_environment()

    assert calls == []


def test_load_environment_reads_dotenv_when_database_url_missing(monkeypatch):
    calls = []
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda: calls.append(True))

    config.load_environment()

    assert calls == [True]
