"""Domain models for the command shell."""

from cmdshell.models.command import CommandInfo
from cmdshell.models.outcome import (
    CommandOutcome,
    Ok,
    HelpRequested,
    MalformedArgument,
    MissingArgument,
    CommandFailed,
    is_outcome,
)
from cmdshell.models.parameter import (
    Parameter,
    ParameterKind,
    ParameterType,
    HELP_PARAMETER,
    positional,
    option,
    flag,
)

__all__ = [
    "CommandInfo",
    "CommandOutcome",
    "Ok",
    "HelpRequested",
    "MalformedArgument",
    "MissingArgument",
    "CommandFailed",
    "is_outcome",
    "Parameter",
    "ParameterKind",
    "ParameterType",
    "HELP_PARAMETER",
    "positional",
    "option",
    "flag",
]
