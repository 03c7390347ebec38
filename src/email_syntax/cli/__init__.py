"""CLI package for email-syntax.

This package provides the command-line interface for checking addresses.
It implements the Command pattern for its operations.
"""

from email_syntax.cli.commands import BaseCommand, CheckAddressesCommand, CommandResult
from email_syntax.cli.formatters import format_address, format_results
from email_syntax.cli.main import CommandDispatcher, main
from email_syntax.cli.parser import create_parser
from email_syntax.cli.validators import validate_args

__all__ = [
    "BaseCommand",
    "CheckAddressesCommand",
    "CommandDispatcher",
    "CommandResult",
    "create_parser",
    "format_address",
    "format_results",
    "main",
    "validate_args",
]
