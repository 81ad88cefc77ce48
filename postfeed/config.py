"""
Configuration management for the post feed core.

Feed generation defaults (search view, entry limit, output formatting)
and application-level logging settings, loaded from environment
variables and an optional .env file.

Responsibility: Centralized configuration for feed synthesis
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeedConfig(BaseSettings):
    """Feed generation configuration"""

    # Search query defaults for the global feed
    search_view: str = Field(default="all")
    search_limit: int = Field(default=30, ge=1)

    # Output formatting
    pretty: bool = Field(default=True)
    indent: str = Field(default="\t")

    model_config = SettingsConfigDict(
        env_prefix="FEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("indent", mode="before")
    @classmethod
    def parse_indent(cls, v):
        """Accept escaped tab/space sequences from env files"""
        if isinstance(v, str):
            return v.replace("\\t", "\t")
        return v


class AppConfig(BaseSettings):
    """Application configuration"""

    app_name: str = Field(default="Post Feed")
    app_version: str = Field(default="1.0.0")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class Settings(BaseSettings):
    """
    Global settings container.

    Loads configuration from:
    1. Environment variables
    2. .env file
    3. Default values

    Example:
        settings = Settings(feed=FeedConfig(search_limit=50, pretty=False))
    """

    app: AppConfig = Field(default_factory=AppConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
