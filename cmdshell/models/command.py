"""Structured command metadata recovered from help text."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommandInfo:
    """Information about a registered command.

    Never stored: rebuilt from the handler's help text on every help
    request so it always matches the live handler.

    Attributes:
        name: Command name (e.g., "hello")
        description: Human-readable description
        usage: Usage line without the "Usage: " prefix
        options: Rendered option lines, built-in help flag excluded
    """

    name: str
    description: str
    usage: str
    options: tuple[str, ...] = field(default_factory=tuple)
