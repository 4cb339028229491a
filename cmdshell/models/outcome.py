"""Closed set of results a command invocation may produce.

Every wrapped handler returns exactly one of the variants below. The
evaluator maps each variant to a display string in one place, so adding
a variant means updating CommandOutcome and that mapping together.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Ok:
    """Command ran and produced output.

    Attributes:
        output: Text shown to the user verbatim
    """

    output: str


@dataclass(frozen=True)
class HelpRequested:
    """Command was invoked with the help sentinel.

    Attributes:
        text: Help text in the fixed layout read by the usage parser
    """

    text: str


@dataclass(frozen=True)
class MalformedArgument:
    """An argument value could not be converted to its declared type."""

    param_name: str
    raw_value: str


@dataclass(frozen=True)
class MissingArgument:
    """A required positional argument was not supplied."""

    param_name: str


@dataclass(frozen=True)
class CommandFailed:
    """The command body (or argument syntax) reported a failure."""

    message: str


CommandOutcome = Union[Ok, HelpRequested, MalformedArgument, MissingArgument, CommandFailed]

OUTCOME_TYPES = (Ok, HelpRequested, MalformedArgument, MissingArgument, CommandFailed)


def is_outcome(value: object) -> bool:
    """Check whether a value is one of the CommandOutcome variants."""
    return isinstance(value, OUTCOME_TYPES)
