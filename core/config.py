"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
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
    app_name: str = Field(default="Notes Service", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=True, alias="DEBUG")

    # API Service
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    api_reload: bool = Field(default=True, alias="API_RELOAD")
    api_workers: int = Field(default=1, alias="API_WORKERS")

    # MongoDB Settings
    mongodb_url: str = Field(default="mongodb://localhost:27017", alias="MONGODB_URL")
    mongodb_database: str = Field(default="notes_db", alias="MONGODB_DATABASE")
    mongodb_root_user: Optional[str] = Field(default=None, alias="MONGODB_ROOT_USER")
    mongodb_root_password: Optional[str] = Field(
        default=None, alias="MONGODB_ROOT_PASSWORD"
    )
    mongodb_max_pool_size: int = Field(default=10, alias="MONGODB_MAX_POOL_SIZE")
    mongodb_min_pool_size: int = Field(default=1, alias="MONGODB_MIN_POOL_SIZE")
    mongodb_server_selection_timeout_ms: int = Field(
        default=5000, alias="MONGODB_SERVER_SELECTION_TIMEOUT_MS"
    )
    mongodb_connect_timeout_ms: int = Field(
        default=10000, alias="MONGODB_CONNECT_TIMEOUT_MS"
    )
    mongodb_socket_timeout_ms: int = Field(
        default=10000, alias="MONGODB_SOCKET_TIMEOUT_MS"
    )

    # Notes
    notes_collection: str = Field(default="notes", alias="NOTES_COLLECTION")
    notes_text_language: str = Field(
        default="russian", alias="NOTES_TEXT_LANGUAGE"
    )  # default_language of the text index
    default_page_limit: int = Field(default=20, alias="DEFAULT_PAGE_LIMIT")
    max_page_limit: int = Field(default=100, alias="MAX_PAGE_LIMIT")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="logs", alias="LOG_DIR")
    log_to_file: bool = Field(default=True, alias="LOG_TO_FILE")

    @property
    def mongodb_connection_url(self) -> str:
        """Construct MongoDB connection URL with authentication if credentials provided."""
        # URL already carries credentials
        if "@" in self.mongodb_url:
            return self.mongodb_url

        if self.mongodb_root_user and self.mongodb_root_password:
            url_without_protocol = self.mongodb_url.replace("mongodb://", "")
            host_port = url_without_protocol.split("/")[0]

            auth_url = f"mongodb://{self.mongodb_root_user}:{self.mongodb_root_password}@{host_port}"

            # authSource must match the database the user was created in
            if self.mongodb_database:
                auth_url += f"/{self.mongodb_database}?authSource={self.mongodb_database}"

            return auth_url

        return self.mongodb_url


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
