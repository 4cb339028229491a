"""Command registry."""

from cmdshell.services.registry.environment import (
    Environment,
    WrappedHandler,
    RESERVED_NAMES,
    check_name,
    new_environment,
    register,
    wrap,
)

__all__ = [
    "Environment",
    "WrappedHandler",
    "RESERVED_NAMES",
    "check_name",
    "new_environment",
    "register",
    "wrap",
]
