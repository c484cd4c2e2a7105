"""Configuration management for minishell."""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from minishell.errors import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Parser limits and interactive prompts."""

    model_config = SettingsConfigDict(
        env_prefix="MINISHELL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Lexer limits
    max_tokens: int = Field(default=128, ge=1, description="Maximum tokens per line, end marker included")
    max_word_length: int = Field(default=255, ge=1, description="Maximum characters kept per word")

    # Command builder limits
    max_stages: int = Field(default=128, ge=1, description="Maximum commands per line")
    max_heredoc_size: int = Field(default=4096, ge=1, description="Maximum characters of here document text")

    # Interactive prompts
    heredoc_prompt: str = Field(default="heredoc> ", description="Prompt shown while reading a here document")
    prompt: str = Field(default="minishell> ", description="Prompt shown by the read loop")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level


def get_settings(**overrides: Any) -> Settings:
    """Get application settings.

    Args:
        **overrides: Explicit field values taking precedence over the environment

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a value fails validation
    """
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
