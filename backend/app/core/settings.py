from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, overridable through environment variables or `.env`."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_name: str = "Realty CRM"
    api_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"
    secret_key: str = "CHANGE_ME"
    access_token_expire_minutes: int = 60 * 24 * 7
    database_url: str = "sqlite:///./realty_crm.db"
    host: str = "0.0.0.0"
    port: int = 8000
    # Follow-up due-ness is compared against the calendar date in this zone
    timezone: str = "Asia/Dhaka"
    cors_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]
    )


@lru_cache
def get_settings() -> Settings:
    """Return a singleton Settings instance."""
    return Settings()
