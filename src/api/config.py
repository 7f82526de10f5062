from pydantic_settings import BaseSettings
from typing import List
from decimal import Decimal
from functools import lru_cache
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "AgriPartner API"
    DEBUG: bool = False
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Database
    POSTGRES_USER: str = "agripartner"
    POSTGRES_PASSWORD: str = "agripartner"
    POSTGRES_HOST: str = "postgres"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "agripartner"
    SQLALCHEMY_DATABASE_URI: str | None = None  # full URL override, e.g. sqlite+aiosqlite:///./dev.db
    DATABASE_ECHO: bool = False

    @property
    def DATABASE_URL(self) -> str:
        if self.SQLALCHEMY_DATABASE_URI:
            return self.SQLALCHEMY_DATABASE_URI
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    # CORS - accepts comma-separated string from env vars
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"]

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        return self.CORS_ORIGINS

    # Financial projections (no market feed; fixed planning constants)
    ESTIMATED_YIELD_TONS_PER_HECTARE: Decimal = Decimal("5")
    MARKET_PRICE_PER_TON: Decimal = Decimal("12000")

    # Dashboard
    DASHBOARD_RECENT_ACTIVITIES_LIMIT: int = 10
    DASHBOARD_NOTIFICATIONS_LIMIT: int = 20

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
