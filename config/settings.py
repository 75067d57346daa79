"""
Application configuration settings.

Centralized configuration using Pydantic Settings for type safety and validation.

Decision: Using pydantic-settings for:
1. Type-safe configuration
2. Environment variable loading
3. Default values
4. Easy testing with different configs (tests set env vars before import)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "user-directory-api"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # Security
    # Cost factor 12 balances security and performance (2^12 = 4096 iterations)
    bcrypt_rounds: int = 12


# Global settings instance
settings = Settings()
