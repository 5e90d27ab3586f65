"""
Application configuration and settings management.

This module loads configuration from environment variables and provides
a centralized settings object shared by the tool server and the
resource server.
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_TOOL_SERVER_PORT = 8787
DEFAULT_RESOURCE_SERVER_PORT = 4021
DEFAULT_X402_SERVER_BASE_URL = "http://localhost:4021"
DEFAULT_X402_SERVER_TIMEOUT_MS = 8000
DEFAULT_PAYMENT_PROVIDER_TIMEOUT_MS = 8000


def _parse_int_or_default(value: Any, default: int) -> int:
    """Parse an integer setting, falling back to the default when unusable."""
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "x402-auto-pay-app"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(default="development", description="deployment environment")

    # Servers
    host: str = "0.0.0.0"
    port: int = DEFAULT_TOOL_SERVER_PORT
    resource_server_port: int = DEFAULT_RESOURCE_SERVER_PORT

    @field_validator("port", mode="before")
    @classmethod
    def parse_port(cls, v: Any) -> int:
        """Fall back to the default tool server port on unparsable input."""
        return _parse_int_or_default(v, DEFAULT_TOOL_SERVER_PORT)

    @field_validator("resource_server_port", mode="before")
    @classmethod
    def parse_resource_server_port(cls, v: Any) -> int:
        """Fall back to the default resource server port on unparsable input."""
        return _parse_int_or_default(v, DEFAULT_RESOURCE_SERVER_PORT)

    # Downstream resource server (used by the tool server)
    x402_server_base_url: str = Field(
        default=DEFAULT_X402_SERVER_BASE_URL,
        description="Base URL of the x402 resource server called by the tools",
    )
    x402_server_timeout_ms: int = DEFAULT_X402_SERVER_TIMEOUT_MS

    @field_validator("x402_server_timeout_ms", mode="before")
    @classmethod
    def parse_x402_server_timeout(cls, v: Any) -> int:
        """Parse the downstream timeout; zero or garbage means the default.

        Args:
            v: Raw timeout value in milliseconds

        Returns:
            int: Timeout in milliseconds
        """
        parsed = _parse_int_or_default(v, DEFAULT_X402_SERVER_TIMEOUT_MS)
        return parsed or DEFAULT_X402_SERVER_TIMEOUT_MS

    # x402 paywall (used by the resource server)
    evm_address: str | None = Field(default=None, description="Recipient address for payments")
    facilitator_url: str | None = Field(
        default=None,
        description="x402 facilitator URL for payment verification and settlement",
    )
    x402_network: str = Field(default="eip155:84532", description="CAIP-2 network id")
    x402_price: str = "$0.001"

    @field_validator("evm_address", "facilitator_url", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat blank strings as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Auto-pay provider
    payment_provider_url: str | None = Field(
        default=None,
        description="Payment provider base URL (mock provider is used when unset)",
    )
    payment_provider_name: str = "x402"
    payment_provider_timeout_ms: int = DEFAULT_PAYMENT_PROVIDER_TIMEOUT_MS

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def missing_payment_config(self) -> dict[str, bool]:
        """Report which paywall settings are absent."""
        return {
            "evmAddress": not self.evm_address,
            "facilitatorUrl": not self.facilitator_url,
        }

    @property
    def paywall_configured(self) -> bool:
        """Check if the paywall has everything it needs."""
        return not any(self.missing_payment_config.values())

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
