"""Configuration management for the Payment Gateway."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AcquiringBankSettings(BaseSettings):
    """Acquiring bank client settings."""

    client: str = Field(
        default="http",
        description="Bank client implementation (http or simulator)",
    )
    base_url: str = Field(
        default="http://localhost:8080",
        description="Acquiring bank base URL",
    )
    endpoint: str = Field(default="/payments", description="Authorization endpoint path")
    timeout_seconds: float = Field(default=10.0, description="Request timeout")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = Field(default=False, description="Debug mode")
    environment: str = Field(default="development", description="Environment name")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    service_name: str = Field(default="payment-gateway", description="Service name")

    # Persistence
    repository_backend: str = Field(
        default="memory",
        description="Payment repository backend (memory or sql)",
    )
    database_url: str = Field(
        default="sqlite:///./payment_gateway.db",
        description="SQLAlchemy connection string for the sql backend",
    )
    seed_demo_payments: bool = Field(
        default=True, description="Load the demo payments into a new repository"
    )

    # Currency reference data (ISO code -> minor units)
    supported_currencies: dict[str, int] = Field(
        default_factory=lambda: {"USD": 2, "GBP": 2, "EUR": 2},
        description="Supported currencies and their minor-unit precision",
    )

    # Acquiring bank
    acquiring_bank: AcquiringBankSettings = Field(default_factory=AcquiringBankSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


# Global settings instance
settings = Settings()
