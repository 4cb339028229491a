"""Line evaluator: tokenize, dispatch, and turn outcomes into text.

evaluate() is total. Unknown commands, argument errors, command
failures and unparsable help text all come back as display strings;
nothing raised by a handler escapes to the caller.
"""

import logging
from typing import Callable

from cmdshell.lib import messages
from cmdshell.lib.exceptions import HelpFormatError
from cmdshell.models.outcome import (
    CommandFailed,
    CommandOutcome,
    MalformedArgument,
    MissingArgument,
    Ok,
)
from cmdshell.services.help.renderer import brief_help, detailed_help
from cmdshell.services.registry.environment import Environment

logger = logging.getLogger(__name__)

HELP = messages.HELP_COMMAND_NAME


def tokenize(line: str) -> list[str]:
    """Split a line on runs of whitespace, dropping empty tokens."""
    return line.split()


def describe_outcome(outcome: CommandOutcome) -> str:
    """Map a handler outcome to the string shown to the user."""
    if isinstance(outcome, Ok):
        return outcome.output
    if isinstance(outcome, MalformedArgument):
        return messages.ERR_MALFORMED.format(name=outcome.param_name, value=outcome.raw_value)
    if isinstance(outcome, MissingArgument):
        return messages.ERR_MISSING.format(name=outcome.param_name)
    if isinstance(outcome, CommandFailed):
        return messages.ERR_COMMAND_FAILED.format(message=outcome.message)
    # HelpRequested on a normal invocation, or anything outside the union.
    return messages.ERR_UNEXPECTED


def evaluate(line: str, env: Environment) -> str:
    """
    Evaluate one command line against an environment.

    Args:
        line: Raw input line
        env: Environment holding the registered commands

    Returns:
        Text to display; never raises
    """
    tokens = tokenize(line)

    if not tokens:
        return messages.with_hint(messages.NO_COMMAND)

    if tokens == [HELP] or tokens == [HELP, HELP]:
        return _help(lambda: brief_help(env))

    if len(tokens) == 2 and tokens[0] == HELP:
        name = tokens[1]
        handler = env.lookup(name)
        if handler is None:
            return messages.command_not_found(name)
        return _help(lambda: detailed_help(handler))

    name, args = tokens[0], tokens[1:]
    handler = env.lookup(name)
    if handler is None:
        logger.debug(f"Unknown command: {name}")
        return messages.with_hint(messages.command_not_found(name))

    logger.debug(f"Dispatching '{name}' with {len(args)} argument(s)")
    try:
        outcome = handler(args)
    except Exception as e:
        logger.exception(f"Unexpected error in command '{name}': {e}")
        return messages.ERR_UNEXPECTED

    return describe_outcome(outcome)


def _help(render: Callable[[], str]) -> str:
    try:
        return render()
    except HelpFormatError as e:
        logger.error(f"Cannot parse help text: {e.message}")
        return messages.ERR_HELP_FORMAT
    except Exception as e:
        logger.exception(f"Unexpected error while rendering help: {e}")
        return messages.ERR_UNEXPECTED


class Evaluator:
    """
    Stateful convenience wrapper holding the current environment.

    The environment itself stays immutable; register() swaps in the
    new value returned by the registry.
    """

    def __init__(self, env: Environment | None = None):
        self.env = env if env is not None else Environment()

    def register(self, name, description, handler) -> "Evaluator":
        """Register a command and return self for chaining."""
        self.env = self.env.register(name, description, handler)
        return self

    def evaluate(self, line: str) -> str:
        return evaluate(line, self.env)
