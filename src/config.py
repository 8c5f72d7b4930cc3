"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(
        default=(
            "postgresql+psycopg2://bookmarks_user:bookmarks_password"
            "@localhost:5432/holo_bookmarks"
        )
    )
    database_startup_check: bool = Field(default=True)

    # Session
    session_secret: str = Field(default="change-me-in-production")
    session_algorithm: str = Field(default="HS256")
    session_max_age_minutes: int = Field(default=10080)  # 7 days
    session_cookie_name: str = Field(default="holo_session")

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:5000",
            "http://localhost:5173",
            "http://127.0.0.1:5000",
        ]
    )

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.session_secret == "change-me-in-production":  # noqa: S105
                raise ValueError("SESSION_SECRET must be changed in production")
            if "localhost" in self.database_url:
                raise ValueError("DATABASE_URL should not use localhost in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
