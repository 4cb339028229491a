"""Recover structured command metadata from help text.

A handler is asked for help with the help sentinel and the text it
returns is split on the fixed delimiters of the help layout. The
layout is the only contract between handlers and this parser: any
missing delimiter fails the whole parse, never a partial CommandInfo.
"""

import logging
from typing import Callable, Sequence

from cmdshell.lib.exceptions import HelpFormatError
from cmdshell.lib.messages import HELP_FLAG_ENTRY, NAME_DELIMITER
from cmdshell.models.command import CommandInfo
from cmdshell.models.outcome import CommandOutcome, HelpRequested
from cmdshell.services.arguments.validator import HELP_SENTINEL

logger = logging.getLogger(__name__)

USAGE_DELIMITER = "Usage: "
OPTIONS_DELIMITER = "Options:\n"


def extract_info(handler: Callable[[Sequence[str]], CommandOutcome]) -> CommandInfo:
    """
    Ask a handler for its help text and parse it.

    Args:
        handler: Wrapped handler (anything taking argument tokens and
            returning a CommandOutcome)

    Returns:
        CommandInfo recovered from the help text

    Raises:
        HelpFormatError: If the handler does not answer with HelpRequested
            or the text does not match the help layout
    """
    outcome = handler(list(HELP_SENTINEL))
    if not isinstance(outcome, HelpRequested):
        raise HelpFormatError(
            f"Expected help text, handler returned {type(outcome).__name__}"
        )
    return parse_help_text(outcome.text)


def parse_help_text(text: str) -> CommandInfo:
    """
    Parse help text in the fixed layout into a CommandInfo.

    Raises:
        HelpFormatError: If any expected delimiter is missing
    """
    name, found, rest = text.partition(NAME_DELIMITER)
    if not found:
        raise HelpFormatError(f"Missing '{NAME_DELIMITER}' after command name", text)

    name = name.strip()
    if not name:
        raise HelpFormatError("Missing command name", text)

    description, found, remainder = rest.partition(USAGE_DELIMITER)
    if not found:
        raise HelpFormatError(f"Missing '{USAGE_DELIMITER.strip()}' line", text)

    usage, found, block = remainder.partition(OPTIONS_DELIMITER)
    if not found:
        # No options: the usage line must be all that is left.
        if len([line for line in remainder.splitlines() if line.strip()]) > 1:
            raise HelpFormatError("Missing 'Options:' header before option lines", text)
        usage, block = remainder, ""

    return CommandInfo(
        name=name,
        description=description.strip(),
        usage=usage.strip(),
        options=_parse_options(block),
    )


def _parse_options(block: str) -> tuple[str, ...]:
    options = []
    for line in block.splitlines():
        line = line.strip()
        if not line or line.startswith(HELP_FLAG_ENTRY):
            continue
        options.append(line)
    return tuple(options)
