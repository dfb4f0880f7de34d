"""
Configuration Management
========================
Loads connection settings for Cloudflare R2 from environment variables
(or a .env file) using Pydantic Settings.

Storage fields are optional here on purpose: completeness is checked by
the Builder, which raises MissingFieldError naming the absent field.
"""

from functools import lru_cache
from typing import Optional, Dict, Any

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def mask_secret(secret: Optional[str], show_chars: int = 4) -> str:
    """
    Mask a secret for safe logging

    Args:
        secret: The secret to mask
        show_chars: Number of characters to show at the start

    Returns:
        str: Masked secret
    """
    if not secret:
        return "NOT_SET"

    if len(secret) <= show_chars:
        return "*" * len(secret)

    return secret[:show_chars] + "*" * (len(secret) - show_chars)


class Settings(BaseSettings):
    """
    R2 SDK Settings

    Variable names follow the .env layout used by the SDK's test harness
    (BUCKET_NAME, ACCESS_KEY_ID, SECRET_ACCESS_KEY, ENDPOINT_URL, REGION).
    """

    # ========================================================================
    # APPLICATION
    # ========================================================================
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: Optional[str] = Field(default=None)

    # ========================================================================
    # CLOUD STORAGE
    # ========================================================================
    BUCKET_NAME: Optional[str] = Field(default=None)
    ACCESS_KEY_ID: Optional[str] = Field(default=None)
    SECRET_ACCESS_KEY: Optional[str] = Field(default=None)
    ENDPOINT_URL: Optional[str] = Field(default=None)
    REGION: str = Field(default="auto")  # R2 uses "auto" region

    # ========================================================================
    # PYDANTIC CONFIGURATION
    # ========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"  # Ignore extra fields in .env
    )

    # ========================================================================
    # COMPUTED PROPERTIES
    # ========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.ENVIRONMENT.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.ENVIRONMENT.lower() == "production"

    @computed_field
    @property
    def r2_configured(self) -> bool:
        """Check if Cloudflare R2 is fully configured"""
        return all([
            self.BUCKET_NAME,
            self.ACCESS_KEY_ID,
            self.SECRET_ACCESS_KEY,
            self.ENDPOINT_URL,
        ])

    # ========================================================================
    # HELPERS
    # ========================================================================

    def mask_secret(self, secret: Optional[str], show_chars: int = 4) -> str:
        """Mask a secret for safe logging"""
        return mask_secret(secret, show_chars)

    def to_safe_dict(self) -> Dict[str, Any]:
        """
        Export configuration as dictionary with secrets masked

        Returns:
            Dict[str, Any]: Safe configuration dictionary
        """
        config = self.model_dump()

        for field in ("ACCESS_KEY_ID", "SECRET_ACCESS_KEY"):
            if field in config:
                config[field] = self.mask_secret(config[field])

        return config


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance

    Uses lru_cache to ensure settings are loaded only once.

    Returns:
        Settings: Settings instance
    """
    return Settings()
