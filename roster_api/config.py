"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./roster.db"
    JWT_SECRET: str = "mobile-roster-secret-key-2024"
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_HOURS: int = 24
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"
    BCRYPT_ROUNDS: int = 10
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:3001"
    ENVIRONMENT: str = "development"
    SSE_HEARTBEAT_SECONDS: float = 30.0
    ROSTER_TIMEZONE: str = "Europe/London"
    LOG_LEVEL: str = "INFO"
    SERVICE_NAME: str = "Care Roster API"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
