"""
Configuration management for DateGetter.
"""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

from dategetter.dialects import PatternDialect

# Load environment variables
load_dotenv()


DEFAULT_PATTERN = "YYYY-MM-DD hh:mm:ss"


class Settings(BaseSettings):
    """Main application settings."""
    
    # Formatting defaults
    default_pattern: str = DEFAULT_PATTERN
    dialect: PatternDialect = PatternDialect.TOKENS
    timezone: str = Field(default="UTC", description="IANA zone used to render instants")
    
    # Logging
    log_level: str = "INFO"
    
    class Config:
        env_prefix = "DATEGETTER_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def update_settings(**kwargs: Any) -> Settings:
    """Update settings with new values."""
    global settings
    settings = Settings(**kwargs)
    return settings
