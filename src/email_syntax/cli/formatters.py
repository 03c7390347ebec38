"""Output formatting utilities for CLI.

This module provides functions for formatting validation results.
"""

import json

from email_syntax.models.validation import EmailValidation

__all__ = ["format_address", "format_results"]


def format_address(address: str | None) -> str:
    """Render an address for a text line.

    Addresses with control characters or other unprintable text are
    shown as Python literals so that a trailing newline stays visible.
    """
    if address is None:
        return "<unsupported input>"
    if address and address.isprintable():
        return address
    return repr(address)


def format_results(
    results: list[EmailValidation],
    json_output: bool = False,
    show_reasons: bool = False,
) -> str:
    """Format validation results for output.

    Args:
        results: Validation results, in input order.
        json_output: Whether to format as JSON.
        show_reasons: Whether to append the failure reason to invalid lines.

    Returns:
        Formatted string output.

    """
    if json_output:
        return json.dumps(
            [result.get_summary() for result in results],
            indent=2,
            ensure_ascii=False,
        )

    lines = []
    for result in results:
        status = "valid" if result.valid else "invalid"
        line = f"{status:<8} {format_address(result.address)}"
        if show_reasons and result.reason is not None:
            line += f"  ({result.reason.value})"
        lines.append(line)

    valid = sum(1 for result in results if result.valid)
    noun = "address" if len(results) == 1 else "addresses"
    lines.append("")
    lines.append(
        f"Checked {len(results)} {noun}: {valid} valid, {len(results) - valid} invalid"
    )
    return "\n".join(lines)
