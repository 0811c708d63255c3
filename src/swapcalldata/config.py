"""Application configuration using pydantic-settings.

The 1inch API key is read from the environment (or a local .env file)
once at process start and injected into the swap client.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # 1inch API
    # ======================
    oneinch_api_key: str = Field(default="", description="1inch developer portal API key")
    oneinch_api_url: str = Field(
        default="https://api.1inch.dev/swap/v5.2/",
        description="1inch swap API base URL (chain id is appended)",
    )
    request_timeout: float = Field(
        default=30.0, description="HTTP request timeout in seconds"
    )

    # ======================
    # Swap defaults
    # ======================
    default_slippage: Decimal = Field(
        default=Decimal("2"), description="Slippage tolerance in percent"
    )

    # ======================
    # Environment
    # ======================
    debug: bool = Field(default=False, description="Enable debug logging")

    @property
    def has_api_key(self) -> bool:
        """Check if a 1inch API key is configured."""
        return bool(normalize_api_key(self.oneinch_api_key))

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "debug": self.debug,
            "oneinch_api_url": self.oneinch_api_url,
            "oneinch_api_key": "***" if self.has_api_key else "(not set)",
            "request_timeout": self.request_timeout,
            "default_slippage": str(self.default_slippage),
        }


def normalize_api_key(key: str) -> str:
    """Strip surrounding whitespace; an empty result means no key."""
    return key.strip()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
