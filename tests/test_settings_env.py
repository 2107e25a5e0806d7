from pathlib import Path

from bondcalc.settings import Settings


def test_settings_reads_env_file(monkeypatch, tmp_path: Path):
    env_content = """
app_env=prod
log_level=DEBUG
currency_symbol=$
http_port=9000
""".strip()

    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text(env_content, encoding="utf-8")

    settings = Settings()

    assert settings.app_env == "prod"
    assert settings.log_level == "DEBUG"
    assert settings.currency_symbol == "$"
    assert settings.http_port == 9000


def test_settings_defaults():
    settings = Settings()

    assert settings.currency_symbol == "€"
    assert settings.http_host == "0.0.0.0"
    assert settings.http_port == 8000


def test_environment_overrides_env_file(monkeypatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("currency_symbol=$\n", encoding="utf-8")
    monkeypatch.setenv("CURRENCY_SYMBOL", "CHF")

    assert Settings().currency_symbol == "CHF"
