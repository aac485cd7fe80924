"""
Configuration management using Pydantic Settings
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from RIPPLE_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="RIPPLE_", extra="ignore")

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_json: bool = Field(default=False, description="Render log lines as JSON")

    # Runtime
    max_render_passes: int = Field(
        default=25,
        ge=1,
        description="Consecutive re-renders allowed before a render loop is reported",
    )

    # Window source used by the demos
    window_width: int = Field(default=1024, ge=0)
    window_height: int = Field(default=768, ge=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
