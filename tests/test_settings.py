from backend.app.core.settings import Settings, get_settings


def test_settings_defaults():
    settings = get_settings()
    assert settings.app_name == "Realty CRM"
    assert settings.environment == "development"
    assert settings.timezone == "Asia/Dhaka"
    assert isinstance(settings.secret_key, str) and settings.secret_key
    assert isinstance(settings.database_url, str) and settings.database_url


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "UTC")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")
    settings = Settings()
    assert settings.timezone == "UTC"
    assert settings.access_token_expire_minutes == 15


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
