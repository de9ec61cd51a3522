"""
Configuration management for the dice roll interaction service.
Uses Pydantic settings for type-safe environment variable handling.
"""

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
        populate_by_name=True,
    )

    # Discord Configuration
    discord_public_key: str = Field(default="", alias="DISCORD_PUBLIC_KEY")
    discord_application_id: str = Field(default="", alias="CLIENT_ID")
    discord_bot_token: str = Field(default="", alias="BOT_TOKEN")
    discord_api_base: str = Field(default="https://discord.com/api/v10", alias="DISCORD_API_BASE")

    # Upstream services
    sheet_api_base: str = Field(default="https://ashworth.fivee.co/api", alias="SHEET_API_BASE")
    spell_api_url: str = Field(default="https://ashworth.fivee.co/api/graphql", alias="SPELL_API_URL")
    spell_image_url_template: str = Field(
        default="https://ashworth.fivee.co/api/spells/{id}/card.png",
        alias="SPELL_IMAGE_URL_TEMPLATE",
    )
    http_timeout: Optional[float] = Field(default=None, alias="HTTP_TIMEOUT")

    # Server Configuration
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    debug: bool = Field(default=False, alias="DEBUG")

    # Redis Configuration
    redis_host: Optional[str] = Field(default=None, alias="REDIS_HOST")
    redis_port: int = Field(default=6379, alias="REDIS_PORT")
    redis_db: int = Field(default=0, alias="REDIS_DB")
    redis_prefix: str = Field(default="rollbot:synced_sheet:", alias="REDIS_PREFIX")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
