"""User-supplied command definitions."""

import argparse
from dataclasses import dataclass, field
from typing import Callable, Iterable, Union

from cmdshell.models.outcome import CommandOutcome
from cmdshell.models.parameter import Parameter
from cmdshell.services.arguments.validator import ArgumentValidator

CommandResult = Union[str, CommandOutcome]
CommandBody = Callable[[argparse.Namespace], CommandResult]


@dataclass(frozen=True)
class CommandDefinition:
    """A command's parameters together with the body that runs it.

    The body receives the parsed arguments as a namespace and returns
    its output text, or a CommandOutcome, or raises CommandError.

    Attributes:
        parameters: Declared parameters in command-line order
        body: Callable executed with the parsed arguments
    """

    parameters: tuple[Parameter, ...]
    body: CommandBody
    validator: ArgumentValidator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Validates parameter names once, at definition time.
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "validator", ArgumentValidator(self.parameters))


def command(*parameters: Parameter) -> Callable[[CommandBody], CommandDefinition]:
    """
    Decorator turning a function into a CommandDefinition.

    Example:
        @command(positional("whom"))
        def hello(args):
            return f"Hello, {args.whom}!"
    """

    def decorator(body: CommandBody) -> CommandDefinition:
        return CommandDefinition(parameters=tuple(parameters), body=body)

    return decorator


def define(parameters: Iterable[Parameter], body: CommandBody) -> CommandDefinition:
    """Build a CommandDefinition from a parameter list and a body callable."""
    return CommandDefinition(parameters=tuple(parameters), body=body)
