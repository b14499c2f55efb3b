"""Configuration settings for the Riot match gateway."""

from __future__ import annotations

from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .riot_api.constants import Platform

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Riot API Configuration
    riot_api_key: str = Field(default="", description="Riot API key (X-Riot-Token)")
    default_platform: Optional[str] = Field(
        default=None,
        description="Platform tag used when a request does not name one (e.g. NA1)",
    )

    # Pipeline Configuration
    request_timeout: float = Field(default=25.0, gt=0)
    max_retries: int = Field(default=3, ge=0)
    cache_ttl: int = Field(default=300, ge=0, description="Response cache TTL in seconds")
    cache_maxsize: int = Field(default=1000, ge=1)

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True, description="JSON log lines; console output when false")
    gzip_minimum_size: int = Field(default=1024, ge=0)

    # CORS Configuration
    cors_origins: str = Field(default="http://localhost:3000,http://127.0.0.1:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    @field_validator("default_platform")
    @classmethod
    def validate_default_platform(cls, v: Optional[str]) -> Optional[str]:
        """Reject a configured default that is not a known platform tag.

        An empty value is treated as "no default configured".
        """
        if v is None or not v.strip():
            return None
        if Platform.from_tag(v) is None:
            raise ValueError(f"{v} is not a valid platform!")
        return v.strip().upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="forbid",  # Forbid extra fields for better type safety
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
