"""Brief and detailed help rendering."""

from typing import Iterable

from cmdshell.lib.messages import (
    DETAILED_HEADER,
    DETAILED_OPTIONS,
    DETAILED_USAGE,
    brief_line,
    help_line,
)
from cmdshell.models.command import CommandInfo
from cmdshell.services.help.usage_parser import extract_info
from cmdshell.services.registry.environment import Environment, WrappedHandler


def render_brief(commands: Iterable[CommandInfo]) -> str:
    """One line per command, then the line for the help command itself."""
    lines = [brief_line(info.name, info.description, info.usage) for info in commands]
    lines.append(help_line())
    return "\n".join(lines)


def render_detailed(info: CommandInfo) -> str:
    """Full help block for a single command.

    The Options section is only rendered when the command has options.
    """
    lines = [
        DETAILED_HEADER.format(name=info.name, description=info.description),
        DETAILED_USAGE.format(usage=info.usage),
    ]
    if info.options:
        lines.append(DETAILED_OPTIONS)
        lines.extend(f"  {option}" for option in info.options)
    return "\n".join(lines)


def brief_help(env: Environment) -> str:
    """
    Brief help over every command in the environment.

    Commands are listed in the environment's iteration order, which is
    implementation-defined.

    Raises:
        HelpFormatError: If any command's help text cannot be parsed
    """
    return render_brief([extract_info(handler) for handler in env.commands.values()])


def detailed_help(handler: WrappedHandler) -> str:
    """
    Detailed help for one command.

    Raises:
        HelpFormatError: If the command's help text cannot be parsed
    """
    return render_detailed(extract_info(handler))
