"""Reference commands used by the demo shell and the test suite."""

from cmdshell.models.parameter import flag, positional
from cmdshell.services.arguments.definition import command
from cmdshell.services.registry.environment import Environment, new_environment


@command(positional("whom", description="who to greet"))
def hello(args) -> str:
    return f"Hello, {args.whom}!"


@command(
    positional("a", int, description="first addend"),
    positional("b", int, description="second addend"),
)
def plus(args) -> str:
    return f"a + b is {args.a + args.b}"


@command(
    positional("a"),
    positional("b"),
    flag("reverse", description="reverse the order"),
)
def concat(args) -> str:
    if args.reverse:
        return args.b + args.a
    return args.a + args.b


DEMO_COMMANDS = [
    ("hello", "say hi", hello),
    ("plus", "add two integers", plus),
    ("concat", "concatenate two strings", concat),
]


def demo_environment(env: Environment | None = None) -> Environment:
    """Register the demo commands on env (or a fresh environment)."""
    env = env if env is not None else new_environment()
    for name, description, definition in DEMO_COMMANDS:
        env = env.register(name, description, definition)
    return env
