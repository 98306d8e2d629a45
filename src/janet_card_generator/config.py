"""Configuration management for the application."""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from janet_card_generator import __version__

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "Janet Card Generator"
    app_version: str = __version__
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Output
    output_dir: Path = Field(default=Path("generated_cards"))
    file_extension: str = Field(default=".janet")

    # Extra templates layered over the built-in ones
    templates_file: Optional[Path] = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="JANET_CARDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
