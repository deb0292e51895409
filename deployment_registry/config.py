"""
Deployment Registry Configuration

Pydantic-based settings with environment variable support.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_NETWORK


class Settings(BaseSettings):
    """Settings loaded from environment variables (DEPLOYMENT_REGISTRY_*)."""

    model_config = SettingsConfigDict(
        env_prefix="DEPLOYMENT_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ==========================================================================
    # MANIFESTS
    # ==========================================================================
    ignition_dir: Path = Path("ignition")  # manifests live under deployments/
    default_network: str = DEFAULT_NETWORK


def get_settings() -> Settings:
    """Build settings from the current environment (not cached)."""
    return Settings()
