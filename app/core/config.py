from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_PROJECT_NAME = "Notification Panel API"
DEFAULT_API_V1_PREFIX = "/api/v1"
DEFAULT_DATABASE_URL = "sqlite:///./notifications.db"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    PROJECT_NAME: str = DEFAULT_PROJECT_NAME
    API_V1_PREFIX: str = DEFAULT_API_V1_PREFIX
    ENV: str = 'development'
    DEBUG: bool = False

    DATABASE_URL: str = DEFAULT_DATABASE_URL
    LOG_LEVEL: str = 'INFO'
    LOG_JSON: bool = False
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ['*']

    AUTO_CREATE_TABLES: bool = False
    SEED_DEMO_DATA: bool = False

    CREATE_ID_RETRIES: int = 3

    PANEL_POLL_INTERVAL_SECONDS: float = 30.0
    PANEL_NEW_WINDOW_HOURS: int = 24
    PANEL_BADGE_MAX: int = 99

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, value):  # type: ignore[override]
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return []
            if value == '*':
                return ['*']
            return [item.strip() for item in value.split(',') if item.strip()]
        return value


settings = Settings()
