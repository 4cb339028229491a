"""Argument validation contract used by every command handler."""

from cmdshell.services.arguments.validator import (
    ArgumentValidator,
    HELP_SENTINEL,
)
from cmdshell.services.arguments.definition import (
    CommandDefinition,
    command,
    define,
)

__all__ = [
    "ArgumentValidator",
    "HELP_SENTINEL",
    "CommandDefinition",
    "command",
    "define",
]
