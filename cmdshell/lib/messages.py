"""Externalized user-facing message templates.

Every string the evaluator and help renderer show to the user lives
here, so front ends and tests refer to one source of truth.
"""

# =============================================================================
# Dispatch Messages
# =============================================================================

HELP_HINT = "type 'help' for a list of commands"

NO_COMMAND = "no command given"

COMMAND_NOT_FOUND = "command not found ({name})"

# =============================================================================
# Outcome Messages
# =============================================================================

ERR_MALFORMED = "ERROR: {name} is malformed ({value})"

ERR_MISSING = "ERROR: {name} is missing"

ERR_COMMAND_FAILED = "ERROR: command failed ({message})"

ERR_UNEXPECTED = "ERROR: unexpected error"

ERR_HELP_FORMAT = "cannot parse help text"

# =============================================================================
# Help Layout
# =============================================================================

HELP_COMMAND_NAME = "help"
HELP_COMMAND_DESCRIPTION = "show command help"
HELP_COMMAND_USAGE = "help [command]"

# Separates the command name from its description in help text.
NAME_DELIMITER = "--"

BRIEF_LINE = "{name} -- {description} -- usage: {usage}"

DETAILED_HEADER = "{name} -- {description}"
DETAILED_USAGE = "Usage: {usage}"
DETAILED_OPTIONS = "Options:"

# Built-in help flag entry emitted by every command with options.
HELP_FLAG_ENTRY = "-h, --help"
HELP_FLAG_DESCRIPTION = "Show this help text"


def with_hint(message: str) -> str:
    """Append the help hint to a message on its own line."""
    return f"{message}\n{HELP_HINT}"


def command_not_found(name: str) -> str:
    """Format the unknown-command message."""
    return COMMAND_NOT_FOUND.format(name=name)


def brief_line(name: str, description: str, usage: str) -> str:
    """Format one line of the brief help listing."""
    return BRIEF_LINE.format(name=name, description=description, usage=usage)


def help_line() -> str:
    """Brief help line describing the built-in help command itself."""
    return brief_line(HELP_COMMAND_NAME, HELP_COMMAND_DESCRIPTION, HELP_COMMAND_USAGE)
