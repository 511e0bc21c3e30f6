"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    policy = settings.progression_policy()
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.core.progression_engine import ProgressionPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )

    # -------------------------------------------------------------------------
    # Supabase Database
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Supabase anonymous key (limited access)",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # History Store
    # -------------------------------------------------------------------------
    history_backend: str = Field(
        default="memory",
        description="Where logged sets live: memory or supabase",
    )
    history_table: str = Field(
        default="workout_sets",
        description="Supabase table holding logged sets",
    )

    # -------------------------------------------------------------------------
    # Progression Policy
    # -------------------------------------------------------------------------
    progression_increase_ratio: float = Field(
        default=0.025,
        ge=0,
        description="Fraction of the last weight added after topping the rep range",
    )
    progression_increment_step: float = Field(
        default=0.5,
        gt=0,
        description="Weight increases are rounded to this step",
    )
    progression_minimum_increment: float = Field(
        default=1.0,
        gt=0,
        description="Increase used when the ratio rounds to zero",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("history_backend")
    @classmethod
    def validate_history_backend(cls, v: str) -> str:
        """Ensure the history backend is supported."""
        valid_backends = {"memory", "supabase"}
        if v.lower() not in valid_backends:
            raise ValueError(
                f"Invalid history_backend '{v}'. Must be one of: {valid_backends}"
            )
        return v.lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"

    def progression_policy(self) -> ProgressionPolicy:
        """Build the weight-increase policy from settings."""
        return ProgressionPolicy(
            increase_ratio=self.progression_increase_ratio,
            increment_step=self.progression_increment_step,
            minimum_increment=self.progression_minimum_increment,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
