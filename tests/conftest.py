import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("DEFAULT_PRECISION", "80")
    monkeypatch.setenv("DEFAULT_ROUNDING_MODE", "HALF_AWAY_FROM_ZERO")

    from bign.domain.services import reset_policy
    from bign.shared.config import get_settings

    get_settings.cache_clear()
    reset_policy()

    yield

    reset_policy()
    get_settings.cache_clear()
