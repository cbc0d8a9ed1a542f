"""Configuration loading for the checkout system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from decimal import Decimal
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Payment gateway configuration
    payment_gateway_url: str = Field(
        default="http://localhost:9000",
        description="Payment provider API endpoint URL",
    )
    payment_api_key: str = Field(
        default="",
        description="Payment provider API key",
    )
    payment_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for payment provider requests in seconds",
    )

    # Order repository configuration
    store_sqlite_path: str = Field(
        default="./data/orders.db",
        description="SQLite database file path",
    )

    # Notification configuration
    notification_backend: Literal["stdout", "markdown"] = Field(
        default="stdout",
        description="Notification backend type",
    )
    notification_output_dir: str = Field(
        default="./outbox",
        description="Output directory for markdown outbox files",
    )

    # Pricing and messaging
    premium_discount: Decimal = Field(
        default=Decimal("0.10"),
        description="Fractional discount applied to PREMIUM customers",
    )
    currency_symbol: str = Field(
        default="R$",
        description="Currency symbol used in confirmation emails",
    )
    confirmation_subject: str = Field(
        default="Your Order has been Approved!",
        description="Subject line of the confirmation email",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("payment_timeout_seconds")
    @classmethod
    def validate_payment_timeout(cls, v: float) -> float:
        """Ensure payment timeout is positive."""
        if v <= 0:
            raise ValueError("payment_timeout_seconds must be positive")
        return v

    @field_validator("premium_discount")
    @classmethod
    def validate_premium_discount(cls, v: Decimal) -> Decimal:
        """Ensure discount is a fraction between 0 and 1."""
        if v < 0 or v > 1:
            raise ValueError("premium_discount must be between 0 and 1")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
