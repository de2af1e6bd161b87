"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings

from domain.quote.delivery import IN_STORE_PICKUP_SHIPPING_METHOD as DEFAULT_PICKUP_SHIPPING_METHOD


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Environment Variables:
        DATABASE_URL: SQLAlchemy connection string
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
        ENVIRONMENT: Deployment environment name
        DEBUG: Enable FastAPI debug mode (tracebacks in error responses)
        IN_STORE_PICKUP_SHIPPING_METHOD: Shipping method code of in-store pickup
    """

    # Database
    DATABASE_URL: str = "sqlite:///./pickupflow.db"

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    ENVIRONMENT: str = "development"

    # Quote validation
    IN_STORE_PICKUP_SHIPPING_METHOD: str = DEFAULT_PICKUP_SHIPPING_METHOD

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()


# Module-level settings instance
settings = get_settings()
