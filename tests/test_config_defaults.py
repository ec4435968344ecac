from app.core.config import Settings


def test_defaults(monkeypatch):
    for key in ("DATABASE_URL", "API_V1_PREFIX", "PANEL_POLL_INTERVAL_SECONDS", "CORS_ORIGINS"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings(_env_file=None)
    assert settings.DATABASE_URL == "sqlite:///./notifications.db"
    assert settings.API_V1_PREFIX == "/api/v1"
    assert settings.PANEL_POLL_INTERVAL_SECONDS == 30
    assert settings.PANEL_NEW_WINDOW_HOURS == 24
    assert settings.CORS_ORIGINS == ["*"]


def test_cors_origins_parsed_from_comma_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:4321, https://cms.example.com")
    settings = Settings(_env_file=None)
    assert settings.CORS_ORIGINS == ["http://localhost:4321", "https://cms.example.com"]


def test_cors_origins_wildcard_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "*")
    settings = Settings(_env_file=None)
    assert settings.CORS_ORIGINS == ["*"]
