"""Configuration management with Pydantic settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ArchiveFormat = Literal["zip", "tar.gz"]


class Settings(BaseSettings):
    """dirpack configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRPACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    output_dir: Path | None = Field(
        default=None,
        description="Directory for archives when no destination is given (defaults to cwd)",
    )

    default_format: ArchiveFormat = Field(
        default="zip",
        description="Archive format used when neither flag, goal, nor suffix decides",
    )

    copy_buffer_size: int = Field(
        default=8192,
        ge=1,
        description="Buffer size in bytes for streaming file content into archives",
    )

    follow_symlinks: bool = Field(
        default=False,
        description="Follow symbolic links while walking (skipped when disabled)",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level configured by the CLI",
    )

    def get_output_dir(self) -> Path:
        """Get the output directory, creating if necessary."""
        if self.output_dir is None:
            return Path.cwd()

        output_dir = self.output_dir.expanduser().resolve()
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
