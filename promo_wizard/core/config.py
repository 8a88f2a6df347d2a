from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PROMO_WIZARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Catalog service
    catalog_provider: Literal["http", "mock"] = Field(
        default="http",
        description="Catalog client implementation to use",
    )
    catalog_base_url: str = Field(
        default="http://localhost:8080",
        min_length=1,
        description="Base URL of the product catalog service",
    )

    # Submit service
    submit_base_url: str = Field(
        default="http://localhost:8080",
        min_length=1,
        description="Base URL of the promotion submit service",
    )

    # Shared HTTP settings
    api_key: str = Field(
        default="",
        description="API key sent as X-API-Key header (skipped when empty)",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Total timeout for HTTP calls, None disables the timeout",
    )

    # Notification texts
    default_success_message: str = Field(
        default="Promotion created successfully!",
        description="Shown when the submit service returns no message",
    )
    default_error_message: str = Field(
        default="An unexpected error occurred.",
        description="Shown when a submit failure carries no message",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: Literal["json", "standard"] = Field(
        default="standard",
        description="Log format (json for production, standard for dev)",
    )


settings = Settings()
