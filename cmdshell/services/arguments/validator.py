"""Argument validation and help text for command handlers.

Each command declares its parameters; the validator turns raw tokens
into a namespace of typed values (or a CommandOutcome describing what
was wrong) and renders the help text layout read back by the usage
parser:

    <name> -- <description>
    Usage: <name> <positional>... [--flag] [--option <type>]
    Options:
      --flag  <description> (<type>, default: <default>)
      -h, --help  Show this help text

The Options block is omitted when the command has no options or flags.
"""

import argparse
import logging
from typing import Iterable, Sequence

from cmdshell.lib.exceptions import DefinitionError
from cmdshell.lib.messages import DETAILED_HEADER, DETAILED_OPTIONS, DETAILED_USAGE
from cmdshell.models.outcome import (
    CommandFailed,
    CommandOutcome,
    MalformedArgument,
    MissingArgument,
)
from cmdshell.models.parameter import HELP_PARAMETER, Parameter, ParameterKind

logger = logging.getLogger(__name__)

# Argument list that asks a handler for its help text.
HELP_SENTINEL: tuple[str, ...] = ("--help",)

END_OF_OPTIONS = "--"


class ArgumentSyntaxError(Exception):
    """Raised by the internal parser instead of printing usage and exiting."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises on errors instead of calling sys.exit."""

    def error(self, message: str):  # type: ignore[override]
        raise ArgumentSyntaxError(message)


class ArgumentValidator:
    """
    Parses raw argument tokens against declared parameters.

    Positionals are matched in declaration order and are required.
    Options take one value, flags take none. Values are converted to
    the declared type after argparse has split the tokens, so a bad
    value is reported against the parameter it belongs to.
    """

    def __init__(self, parameters: Iterable[Parameter] = ()):
        self.parameters: tuple[Parameter, ...] = tuple(parameters)
        self._check_unique()

    def _check_unique(self) -> None:
        seen: set[str] = set()
        for param in self.parameters:
            if param.builtin:
                raise DefinitionError(
                    f"Parameter '{param.name}' is provided by the shell",
                    parameter=param.name,
                )
            if param.dest in seen:
                raise DefinitionError(
                    f"Duplicate parameter name: {param.name}", parameter=param.name
                )
            seen.add(param.dest)

    @property
    def positionals(self) -> list[Parameter]:
        return [p for p in self.parameters if p.kind is ParameterKind.POSITIONAL]

    @property
    def options(self) -> list[Parameter]:
        """Declared options and flags, built-in help flag excluded."""
        return [p for p in self.parameters if p.kind is not ParameterKind.POSITIONAL]

    def _build_parser(self) -> _ArgumentParser:
        parser = _ArgumentParser(add_help=False, allow_abbrev=False)
        for param in self.parameters:
            if param.kind is ParameterKind.POSITIONAL:
                # Optional at the argparse level so a missing value can be
                # reported as MissingArgument for the right parameter.
                parser.add_argument(param.dest, nargs="?", default=None)
            elif param.kind is ParameterKind.FLAG:
                parser.add_argument(param.flag_name, dest=param.dest, action="store_true")
            else:
                parser.add_argument(param.flag_name, dest=param.dest, default=None)
        return parser

    def parse(self, tokens: Sequence[str]) -> argparse.Namespace | CommandOutcome:
        """
        Parse raw tokens into typed values.

        Args:
            tokens: Arguments following the command name

        Returns:
            Namespace with one attribute per parameter on success, otherwise
            MissingArgument, MalformedArgument or CommandFailed
        """
        # argparse would consume a bare "--" as its end-of-options marker.
        if END_OF_OPTIONS in tokens:
            return CommandFailed(f"unrecognized arguments: {END_OF_OPTIONS}")

        parser = self._build_parser()
        try:
            namespace = parser.parse_intermixed_args(list(tokens))
        except ArgumentSyntaxError as e:
            logger.debug(f"Argument syntax error: {e}")
            return CommandFailed(str(e))

        values = argparse.Namespace()
        for param in self.parameters:
            raw = getattr(namespace, param.dest)
            if param.kind is ParameterKind.FLAG:
                setattr(values, param.dest, bool(raw))
                continue
            if raw is None:
                if param.kind is ParameterKind.POSITIONAL:
                    return MissingArgument(param.name)
                setattr(values, param.dest, param.default)
                continue
            try:
                setattr(values, param.dest, param.value_type.convert(raw))
            except ValueError:
                return MalformedArgument(param.name, raw)
        return values

    def usage(self, name: str) -> str:
        """Render the usage line (without the "Usage: " prefix)."""
        fragments = [name]
        fragments.extend(p.usage_fragment() for p in self.positionals)
        fragments.extend(p.usage_fragment() for p in self.options)
        return " ".join(fragments)

    def format_help(self, name: str, description: str) -> str:
        """Render the help text for a command in the fixed layout."""
        lines = [
            DETAILED_HEADER.format(name=name, description=description),
            DETAILED_USAGE.format(usage=self.usage(name)),
        ]
        options = self.options
        if options:
            lines.append(DETAILED_OPTIONS)
            for param in [*options, HELP_PARAMETER]:
                lines.append(f"  {param.option_line()}")
        return "\n".join(lines)
