"""CLI argument parser configuration.

This module provides the argument parser for the email-syntax CLI.
"""

import argparse

from email_syntax import __version__
from email_syntax.config.defaults import STDIN_PATH

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with all CLI options.

    """
    parser = argparse.ArgumentParser(
        prog="email-syntax",
        description=(
            "Check email addresses against the HTML5 definition of a valid "
            "e-mail address. No network lookups are performed."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Check a single address
  email-syntax john_doe@example.com

  # Check several addresses and show why rejected ones failed
  email-syntax --reasons a@b.com "John.Doe@exam_ple.com"

  # Check a file with one address per line
  email-syntax --file addresses.txt

  # Read addresses from stdin and print JSON
  cat addresses.txt | email-syntax --file {STDIN_PATH} --json

  # Only set the exit status
  email-syntax --quiet "$ADDRESS"

Exit status is 0 when every address is valid, 1 when any is invalid
and 2 on usage or input errors.
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "addresses",
        nargs="*",
        metavar="ADDRESS",
        help="Email address to check",
    )

    parser.add_argument(
        "--file",
        "-f",
        type=str,
        metavar="FILE",
        help=f"Read addresses from FILE, one per line ('{STDIN_PATH}' for stdin)",
    )

    # Output format
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output results as JSON instead of formatted text",
    )

    parser.add_argument(
        "--reasons",
        action="store_true",
        dest="show_reasons",
        help="Show why each invalid address was rejected",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Print nothing; report through the exit status only",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    return parser
