"""Self-describing help: usage parsing and rendering."""

from cmdshell.services.help.usage_parser import extract_info, parse_help_text
from cmdshell.services.help.renderer import (
    brief_help,
    detailed_help,
    render_brief,
    render_detailed,
)

__all__ = [
    "extract_info",
    "parse_help_text",
    "brief_help",
    "detailed_help",
    "render_brief",
    "render_detailed",
]
