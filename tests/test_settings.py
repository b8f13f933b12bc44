"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from app.shared.config.settings import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "API_RATE_LIMIT", "HEURISTIC_UNITS_PER_CASE", "DEFAULT_UOM", "DB_CONNECT_RETRIES"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.API_RATE_LIMIT == "120/minute"
    assert settings.HEURISTIC_UNITS_PER_CASE == 12
    assert settings.DEFAULT_UOM == "lb"
    assert settings.DB_CONNECT_RETRIES == 3


def test_environment_variables_are_read(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("DB_CONNECT_RETRY_DELAY", "0.5")

    settings = Settings(_env_file=None)

    assert settings.PORT == 9090
    assert settings.DB_CONNECT_RETRY_DELAY == 0.5


def test_values_are_normalised():
    settings = Settings(_env_file=None, ENVIRONMENT="Production", LOG_LEVEL="debug", LOG_FORMAT="TEXT")

    assert settings.ENVIRONMENT == "production"
    assert settings.is_production
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "text"


def test_cors_origins_list():
    settings = Settings(_env_file=None, CORS_ORIGINS="https://a.example, https://b.example")

    assert settings.cors_origins_list == ["https://a.example", "https://b.example"]


@pytest.mark.parametrize("overrides", [
    {"ENVIRONMENT": "qa"},
    {"LOG_LEVEL": "verbose"},
    {"LOG_FORMAT": "xml"},
    {"CORS_ORIGINS": "ftp://files.example"},
    {"DB_CONNECT_RETRIES": 0},
    {"DB_CONNECT_RETRY_DELAY": -1},
    {"HEURISTIC_UNITS_PER_CASE": 0},
])
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)
