"""Centralized client settings using pydantic settings."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
# Look for .env next to the package, then in the working directory
env_path = Path(__file__).parent.parent.parent / ".env"
if not env_path.exists():
    env_path = Path.cwd() / ".env"
load_dotenv(dotenv_path=env_path, override=False)

DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://localhost:3000"]


class Settings(BaseSettings):
    """Environment-aware configuration (API host, paging, logging)."""

    # Application settings
    app_name: str = "Product Board"
    log_level: str = "INFO"

    # Remote products API
    api_base_url: str = Field(
        default="http://localhost:5000",
        description="Scheme and host of the products API",
    )
    products_path: str = Field(
        default="/api/products",
        description="Path of the products collection resource",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds before an outstanding request is abandoned",
    )

    # View settings
    items_per_page: int = Field(default=5, ge=1, description="Rows per page")
    reset_page_on_search: bool = Field(
        default=False,
        description="Jump back to page 1 whenever the search term changes",
    )

    # CORS settings for the stub API - stored as string, converted to list via property
    cors_origins_raw: str | None = Field(
        default=None,
        validation_alias="CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins",
        exclude=True,
    )

    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_BOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS from comma-separated string to list."""
        if self.cors_origins_raw is None or not self.cors_origins_raw.strip():
            return list(DEFAULT_CORS_ORIGINS)
        origins = [
            origin.strip().rstrip("/")
            for origin in self.cors_origins_raw.split(",")
            if origin.strip()
        ]
        return origins if origins else list(DEFAULT_CORS_ORIGINS)

    @field_validator("api_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Keep the base URL joinable with products_path."""
        return v.rstrip("/")

    @field_validator("products_path", mode="after")
    @classmethod
    def ensure_leading_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        return v if v.startswith("/") else f"/{v}"

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{v}'")
        return level


@lru_cache
def get_settings() -> Settings:
    """Provide singleton-like access for dependency injection."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level)
