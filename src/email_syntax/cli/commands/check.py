"""Check addresses command implementation.

This module implements the command that validates addresses given on
the command line or read from a file.
"""

import sys
from argparse import Namespace
from pathlib import Path
from typing import TextIO

from email_syntax.cli.commands.base import BaseCommand, CommandResult
from email_syntax.cli.exceptions import InputError
from email_syntax.config.defaults import STDIN_PATH
from email_syntax.logging_config import get_logger
from email_syntax.validation import validate_email

__all__ = ["CheckAddressesCommand"]

logger = get_logger(__name__)


class CheckAddressesCommand(BaseCommand):
    """Command to validate a batch of addresses.

    Attributes:
        _stdin: Stream read for ``--file -``; sys.stdin when None.

    """

    def __init__(self, stdin: TextIO | None = None) -> None:
        """Initialize the command.

        Args:
            stdin: Stream to read for ``--file -``. Defaults to sys.stdin
                at execution time.

        """
        self._stdin = stdin

    @property
    def name(self) -> str:
        """Get the command name."""
        return "check"

    def execute(self, args: Namespace) -> CommandResult:
        """Execute the check command.

        Args:
            args: Parsed arguments with addresses and/or a file path.

        Returns:
            CommandResult with exit code 0 when all addresses are valid,
            1 otherwise.

        Raises:
            InputError: If the address file cannot be read.

        """
        addresses = list(getattr(args, "addresses", None) or [])
        file = getattr(args, "file", None)
        if file is not None:
            addresses.extend(self.read_addresses(file))

        results = []
        for address in addresses:
            result = validate_email(address)
            logger.debug(
                "address_checked",
                address=address,
                valid=result.valid,
                reason=result.reason.value if result.reason else None,
            )
            results.append(result)

        invalid = sum(1 for result in results if not result.valid)
        logger.info(
            "addresses_checked",
            command=self.name,
            total=len(results),
            valid=len(results) - invalid,
            invalid=invalid,
        )

        return CommandResult(
            exit_code=0 if invalid == 0 else 1,
            results=results,
            message=None if invalid == 0 else f"{invalid} invalid address(es)",
        )

    def read_addresses(self, file: str) -> list[str]:
        """Read one address per line.

        Line terminators are removed; nothing else is stripped, so
        surrounding whitespace still invalidates an address. Blank lines
        are skipped.

        Args:
            file: Path to a UTF-8 text file, or ``-`` for stdin.

        Returns:
            Addresses in file order.

        Raises:
            InputError: If the file cannot be read or is not UTF-8.

        """
        try:
            if file == STDIN_PATH:
                text = (self._stdin or sys.stdin).read()
            else:
                text = Path(file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"Cannot read addresses from {file}: {e}") from e

        lines = (line.removesuffix("\r") for line in text.split("\n"))
        addresses = [line for line in lines if line]
        logger.debug("addresses_read", source=file, count=len(addresses))
        return addresses
