"""Configuration management using pydantic-settings."""

from flask import current_app
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Built once at process start and handed to ``create_app()``. Components
    receive the values they need as explicit arguments.
    """

    database_path: str = "./data/bloglist.db"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    # JWT Configuration
    jwt_secret_key: str = "change-me-in-production-use-env-var"
    jwt_expiry_days: int = 30

    # Bcrypt work factor (higher = more secure but slower)
    # Tests use 4 for faster execution
    bcrypt_work_factor: int = 12

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


def current_settings() -> Settings:
    """Return the Settings instance the running app was created with."""
    return current_app.extensions["bloglist"]
