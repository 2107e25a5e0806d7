import pytest


@pytest.fixture(autouse=True)
def _stable_env(monkeypatch, tmp_path):
    # no developer .env leaking into tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.delenv("CURRENCY_SYMBOL", raising=False)
    monkeypatch.delenv("HTTP_HOST", raising=False)
    monkeypatch.delenv("HTTP_PORT", raising=False)

    from bondcalc.settings import get_settings

    if hasattr(get_settings, "cache_clear"):
        get_settings.cache_clear()


@pytest.fixture
def frozen_year(monkeypatch):
    monkeypatch.setattr("bondcalc.domain.compound.current_year", lambda: 2025)
    return 2025
