"""Command registry: immutable name -> handler environments.

Registration never mutates an Environment; it returns a new one that
shares nothing mutable with the old. Sessions that need their own set
of commands each keep their own Environment value.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

from cmdshell.lib.exceptions import CommandError, InvalidNameError, ReservedNameError
from cmdshell.lib.messages import HELP_COMMAND_NAME, NAME_DELIMITER
from cmdshell.models.outcome import CommandFailed, CommandOutcome, HelpRequested, Ok, is_outcome
from cmdshell.services.arguments.definition import CommandDefinition
from cmdshell.services.arguments.validator import HELP_SENTINEL

logger = logging.getLogger(__name__)

RESERVED_NAMES = frozenset({HELP_COMMAND_NAME})


def check_name(name: str) -> None:
    """
    Validate a command name before it enters an environment.

    Raises:
        ReservedNameError: If name is reserved by the shell
        InvalidNameError: If name is empty, contains whitespace or "--"
    """
    if name in RESERVED_NAMES:
        raise ReservedNameError(name)
    if not name or any(c.isspace() for c in name) or NAME_DELIMITER in name:
        raise InvalidNameError(name)


class WrappedHandler:
    """
    Registered form of a command.

    Answers both normal invocations and help requests: the exact
    argument list ["--help"] yields HelpRequested with the command's
    help text, anything else runs the definition.
    """

    def __init__(self, name: str, description: str, definition: CommandDefinition):
        self.name = name
        self.description = description
        self.definition = definition

    def __call__(self, args: Sequence[str]) -> CommandOutcome:
        validator = self.definition.validator
        if tuple(args) == HELP_SENTINEL:
            return HelpRequested(validator.format_help(self.name, self.description))

        parsed = validator.parse(args)
        if is_outcome(parsed):
            return parsed

        try:
            result = self.definition.body(parsed)
        except CommandError as e:
            logger.debug(f"Command '{self.name}' failed: {e.message}")
            return CommandFailed(e.message)

        if isinstance(result, str):
            return Ok(result)
        if is_outcome(result):
            return result
        raise TypeError(
            f"Command '{self.name}' returned {type(result).__name__}, "
            f"expected str or CommandOutcome"
        )

    def __repr__(self) -> str:
        return f"WrappedHandler(name={self.name!r})"


def wrap(name: str, description: str, handler: CommandDefinition) -> WrappedHandler:
    """Wrap a command definition so it also answers help requests."""
    return WrappedHandler(name, description, handler)


@dataclass(frozen=True)
class Environment:
    """Registry of commands for one shell instance.

    Attributes:
        commands: Read-only mapping of command name to wrapped handler.
            Iteration order is the dict insertion order and is not part
            of the contract.
    """

    commands: Mapping[str, WrappedHandler] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in self.commands:
            check_name(name)
        object.__setattr__(self, "commands", MappingProxyType(dict(self.commands)))

    def register(
        self, name: str, description: str, handler: CommandDefinition
    ) -> "Environment":
        """
        Return a new environment that also contains the given command.

        A command already registered under the same name is replaced
        (last registration wins).

        Args:
            name: Command name typed at the prompt
            description: One-line description shown in help
            handler: Definition of the command's parameters and body

        Returns:
            New Environment; self is left unchanged

        Raises:
            ReservedNameError: If name is reserved by the shell
            InvalidNameError: If name is not a single token or contains "--"
        """
        check_name(name)

        if name in self.commands:
            logger.warning(f"Command '{name}' is already registered; replacing it")

        commands = dict(self.commands)
        commands[name] = wrap(name, description, handler)
        logger.debug(f"Registered command: {name}")
        return Environment(commands)

    def lookup(self, name: str) -> WrappedHandler | None:
        """Get the handler registered under name, or None."""
        return self.commands.get(name)

    def names(self) -> list[str]:
        return list(self.commands)

    def __contains__(self, name: object) -> bool:
        return name in self.commands

    def __iter__(self) -> Iterator[str]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)


def new_environment() -> Environment:
    """Create an environment with no commands."""
    return Environment()


def register(
    env: Environment, name: str, description: str, handler: CommandDefinition
) -> Environment:
    """Functional form of Environment.register."""
    return env.register(name, description, handler)
