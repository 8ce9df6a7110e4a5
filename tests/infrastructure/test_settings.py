"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import WealthSettings

_ENV_VARS = (
    "WEALTH_REFERENCE_CURRENCY",
    "WEALTH_DISPLAY_CURRENCY",
    "WEALTH_VIEWER_ENTITY_ID",
    "WEALTH_RATES_TTL_SECONDS",
    "WEALTH_CRYPTO_TTL_SECONDS",
)


@pytest.fixture
def logger(monkeypatch) -> MagicMock:
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return fake_logger


def test_from_env_defaults(logger) -> None:
    """Unset variables should fall back to the consolidated EUR view."""
    settings = WealthSettings.from_env()

    assert settings == WealthSettings()
    assert settings.viewer_entity_id is None
    logger.warning.assert_not_called()


def test_from_env_reads_values(monkeypatch, logger) -> None:
    """Codes should be normalized and the display currency follow."""
    monkeypatch.setenv("WEALTH_REFERENCE_CURRENCY", " usd ")
    monkeypatch.setenv("WEALTH_VIEWER_ENTITY_ID", "party-1")
    monkeypatch.setenv("WEALTH_RATES_TTL_SECONDS", "60")
    monkeypatch.setenv("WEALTH_CRYPTO_TTL_SECONDS", "0")

    settings = WealthSettings.from_env()

    assert settings.reference_currency == "USD"
    assert settings.display_currency == "USD"
    assert settings.viewer_entity_id == "party-1"
    assert settings.rates_ttl_seconds == 60
    assert settings.crypto_ttl_seconds == 0


@pytest.mark.parametrize("raw", ["soon", "-5"])
def test_from_env_rejects_bad_ttl(monkeypatch, logger, raw) -> None:
    """Invalid TTLs should log a warning and keep the default."""
    monkeypatch.setenv("WEALTH_RATES_TTL_SECONDS", raw)

    settings = WealthSettings.from_env()

    assert settings.rates_ttl_seconds == 3600
    logger.warning.assert_called_once()
