"""Shared pytest fixtures for all test types."""

import pytest

from cmdshell.cli.demo import concat, hello, plus
from cmdshell.lib.config import reset_settings
from cmdshell.services.registry.environment import Environment, new_environment


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached settings so each test sees its own environment variables."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def empty_env() -> Environment:
    """Environment with no commands."""
    return new_environment()


@pytest.fixture
def hello_env(empty_env) -> Environment:
    """Environment with only the hello command."""
    return empty_env.register("hello", "say hi", hello)


@pytest.fixture
def demo_env(empty_env) -> Environment:
    """Environment with hello, plus and concat."""
    return (
        empty_env.register("hello", "say hi", hello)
        .register("plus", "add two integers", plus)
        .register("concat", "concatenate two strings", concat)
    )


@pytest.fixture
def concat_help_text() -> str:
    """Help text produced by the concat command."""
    return (
        "concat -- concatenate two strings\n"
        "Usage: concat <a> <b> [--reverse]\n"
        "Options:\n"
        "  --reverse  reverse the order (bool, default: false)\n"
        "  -h, --help  Show this help text"
    )
