"""CLI entry point for the command shell."""

import argparse
import logging
import sys
from typing import Iterable, TextIO

from cmdshell import __version__
from cmdshell.cli.demo import demo_environment
from cmdshell.lib.config import get_settings
from cmdshell.lib.exceptions import ConfigError
from cmdshell.services.evaluator import Evaluator

logger = logging.getLogger(__name__)

# Exit codes per CLI contract
EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="cmdshell",
        description="Minimal command shell with self-describing help",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cmdshell
  cmdshell -c "plus 1 2"
  cmdshell -c "help concat" --verbose
        """,
    )

    parser.add_argument(
        "-c", "--command",
        type=str,
        default=None,
        help="Evaluate a single command line and exit",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def setup_logging(level: int) -> None:
    """Configure logging for the shell."""
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def repl(
    evaluator: Evaluator,
    lines: Iterable[str],
    output: TextIO,
    prompt: str = "",
    exit_command: str = "exit",
) -> None:
    """
    Evaluate lines until input is exhausted or the exit command is read.

    Args:
        evaluator: Evaluator holding the environment
        lines: Source of raw input lines
        output: Stream results are written to
        prompt: Text written before each line is read
        exit_command: Line that stops the loop
    """
    output.write(prompt)
    output.flush()
    for line in lines:
        if line.strip() == exit_command:
            break
        output.write(evaluator.evaluate(line) + "\n")
        output.write(prompt)
        output.flush()
    output.write("\n")


def run(args: argparse.Namespace) -> int:
    """
    Run the shell with the given arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    settings = get_settings()

    try:
        setup_logging(settings.effective_log_level(args.verbose))
    except ConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    evaluator = Evaluator(demo_environment())
    logger.debug(f"Loaded commands: {', '.join(evaluator.env.names())}")

    if args.command is not None:
        print(evaluator.evaluate(args.command))
        return EXIT_SUCCESS

    prompt = settings.prompt if sys.stdin.isatty() else ""
    repl(evaluator, sys.stdin, sys.stdout, prompt=prompt, exit_command=settings.exit_command)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help and --version exit with 0; usage errors with 2.
        return EXIT_SUCCESS if e.code == 0 else EXIT_USAGE_ERROR

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
