"""Configuration management via environment variables and pydantic-settings."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Shell configuration loaded from environment variables.

    Priority (highest to lowest):
    1. CLI arguments (handled separately)
    2. Environment variables
    3. .env file
    4. Defaults defined here
    """

    prompt: str = Field(
        default="> ",
        alias="CMDSHELL_PROMPT",
        description="Prompt shown by the interactive read loop",
    )

    verbose: bool = Field(
        default=False, alias="CMDSHELL_VERBOSE", description="Enable debug logging"
    )

    log_level: str = Field(
        default="WARNING",
        alias="CMDSHELL_LOG_LEVEL",
        description="Logging level name: DEBUG, INFO, WARNING, ERROR",
    )

    exit_command: str = Field(
        default="exit",
        alias="CMDSHELL_EXIT_COMMAND",
        description="Line that ends the interactive read loop",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    def effective_log_level(self, verbose: bool = False) -> int:
        """
        Resolve the numeric logging level.

        Verbose mode (from the CLI or CMDSHELL_VERBOSE) forces DEBUG.

        Raises:
            ConfigError: If log_level is not a known level name
        """
        from cmdshell.lib.exceptions import ConfigError

        if verbose or self.verbose:
            return logging.DEBUG

        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ConfigError(
                f"Unknown log level '{self.log_level}'. "
                f"Set CMDSHELL_LOG_LEVEL to DEBUG, INFO, WARNING or ERROR."
            )
        return level


# Global settings instance (lazy loaded)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
