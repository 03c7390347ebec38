"""Validation utilities for CLI arguments."""

import argparse
from pathlib import Path

from email_syntax.config.defaults import STDIN_PATH

__all__ = ["validate_args"]


def validate_args(args: argparse.Namespace) -> str | None:
    """Validate CLI arguments for consistency.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Error message if validation fails, None if valid.

    """
    # getattr because tests may construct partial Namespace objects
    addresses = getattr(args, "addresses", None) or []
    file = getattr(args, "file", None)

    if not addresses and file is None:
        return "Error: at least one ADDRESS or --file is required"

    if file is not None and file != STDIN_PATH:
        path = Path(file)
        if not path.exists():
            return f"Error: Address file not found: {file}"
        if not path.is_file():
            return f"Error: Address file is not a regular file: {file}"

    if getattr(args, "quiet", False) and getattr(args, "json_output", False):
        return "Error: --quiet cannot be combined with --json"

    return None
