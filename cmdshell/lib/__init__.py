"""Shared utilities, messages and configuration."""

from cmdshell.lib.config import Settings, get_settings, reset_settings
from cmdshell.lib.exceptions import (
    ShellError,
    ConfigError,
    RegistrationError,
    ReservedNameError,
    InvalidNameError,
    DefinitionError,
    CommandError,
    HelpFormatError,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "ShellError",
    "ConfigError",
    "RegistrationError",
    "ReservedNameError",
    "InvalidNameError",
    "DefinitionError",
    "CommandError",
    "HelpFormatError",
]
