"""
Report configuration using pydantic-settings.

Values come from ``SALES_REPORT_*`` environment variables or a local .env.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Report settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="SALES_REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # How many products to keep in each seller's top list
    TOP_PRODUCTS_LIMIT: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("TOP_PRODUCTS_LIMIT")
    @classmethod
    def limit_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("TOP_PRODUCTS_LIMIT must be at least 1")
        return v


# Singleton instance
settings = Settings()
