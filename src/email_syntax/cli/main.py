"""CLI main entry point.

This module provides the main entry point for the email-syntax CLI.
"""

import argparse
import sys
import traceback

from email_syntax.cli.commands import CheckAddressesCommand
from email_syntax.cli.exceptions import CLIError
from email_syntax.cli.formatters import format_results
from email_syntax.cli.parser import create_parser
from email_syntax.cli.validators import validate_args
from email_syntax.config.exceptions import ConfigurationError
from email_syntax.config.settings import Settings, get_settings
from email_syntax.logging_config import configure_logging, get_logger

__all__ = ["main", "CommandDispatcher"]

logger = get_logger(__name__)

EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


class CommandDispatcher:
    """Dispatches CLI commands to appropriate handlers.

    Attributes:
        _settings: Settings providing output defaults.
        _check_cmd: Command handler for checking addresses.

    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the command dispatcher with all command handlers."""
        self._settings = settings
        self._check_cmd = CheckAddressesCommand()

    def dispatch(self, args: argparse.Namespace) -> int:
        """Dispatch to the appropriate command based on arguments.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 when every address is valid, 1 otherwise).

        """
        result = self._check_cmd.execute(args)

        if not getattr(args, "quiet", False):
            output = format_results(
                result.results,
                json_output=getattr(args, "json_output", False)
                or self._settings.output.json_output,
                show_reasons=getattr(args, "show_reasons", False)
                or self._settings.output.show_reasons,
            )
            print(output)
            if result.message:
                print(result.message, file=sys.stderr)

        return result.exit_code


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code: 0 all valid, 1 any invalid, 2 usage or input error.

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    _setup_logging(settings, getattr(args, "verbose", False))

    error = validate_args(args)
    if error:
        print(error, file=sys.stderr)
        return EXIT_USAGE

    try:
        dispatcher = CommandDispatcher(settings)
        return dispatcher.dispatch(args)

    except CLIError as e:
        logger.error("input_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        if getattr(args, "verbose", False):
            traceback.print_exc()
        return EXIT_USAGE


def _setup_logging(settings: Settings, verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        settings: Settings providing the logging defaults.
        verbose: Whether --verbose was given.

    """
    configure_logging(
        verbose=verbose or settings.logging.verbose,
        json_output=settings.logging.json_output,
    )


if __name__ == "__main__":
    sys.exit(main())
