"""
Centralized configuration for the Postline backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are grouped by prefix (e.g., JWT_*, SUPABASE_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Postline API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["OPTIONS", "GET", "POST", "PUT", "PATCH", "DELETE"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization"]

    # Auth
    jwt_secret_key: str = ""
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int = 3600
    password_hash_rounds: int = 12

    # Supabase (tables + storage)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""
    storage_bucket: str = "post-images"
    supabase_timeout_seconds: int = 10

    # Feed
    posts_per_page: int = 2
    min_text_length: int = 5

    # Status mapping for unknown posts (the two API surfaces disagree)
    rest_post_not_found_status: int = 422
    graphql_post_not_found_code: int = 404

    # Real-time notifier
    notifier_queue_size: int = 100


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
