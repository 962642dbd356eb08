"""
ProctorView Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
Nothing is required: every value has a working default.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Service ──
    app_name: str = Field(default="ProctorView", description="FastAPI application title")
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # ── Window violation buckets (seconds away from the exam window) ──
    window_short_seconds: int = Field(
        default=10, description="Upper bound (inclusive) of the 'up to 10 seconds' bucket"
    )
    window_long_seconds: int = Field(
        default=60, description="Upper bound (inclusive) of the 'up to 1 minute' bucket"
    )

    # ── Image violation buckets (consecutive anomalous frames) ──
    image_mid_threshold: int = Field(
        default=3, description="Lower bound (inclusive) of the '3 to 5 consecutive' bucket"
    )
    image_high_threshold: int = Field(
        default=5, description="Lower bound (inclusive) of the '5+ consecutive' bucket"
    )

    # ── Presets ──
    builtin_presets_enabled: bool = Field(
        default=True, description="Seed the preset registry with the built-in bundles"
    )
    max_saved_presets: int = Field(
        default=100, gt=0, description="Most user-saved presets a registry holds at once"
    )

    # ── Search ──
    max_search_term_length: int = Field(
        default=200, description="Longest search term accepted by the HTTP API"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported by other modules
settings = Settings()
