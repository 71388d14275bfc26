"""
Configuration management for Gemini Dice
"""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiDiceConfig(BaseSettings):
    """Application configuration with environment variable support."""

    # Discord settings
    bot_token: str = ""
    guild_id: Optional[int] = None  # None accepts messages from every guild
    command_prefix: str = "!"

    # Private roll delivery
    gm_channel_id: Optional[int] = None  # Falls back to DMing the guild owner

    # Application settings
    log_level: str = "INFO"
    log_file: str = "logs/gemini_dice.json"
    environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


# Global configuration instance - lazily initialized to avoid import-time errors
_config = None

def get_config() -> GeminiDiceConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = GeminiDiceConfig()
    return _config
