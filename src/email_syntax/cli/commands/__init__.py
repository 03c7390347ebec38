"""CLI command implementations.

This module exports the command classes for the CLI.
"""

from email_syntax.cli.commands.base import BaseCommand, CommandResult
from email_syntax.cli.commands.check import CheckAddressesCommand

__all__ = [
    "BaseCommand",
    "CheckAddressesCommand",
    "CommandResult",
]
