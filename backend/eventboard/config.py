"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./eventboard.db"
    CORS_ORIGINS: str = "http://localhost:3000"
    EVENTS_PAGE_SIZE: int = 3
    EVENTS_TIMEZONE: str = "UTC"  # IANA tz used for today/tomorrow/week windows

    class Config:
        env_file = ".env"


settings = Settings()
