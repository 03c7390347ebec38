"""Pytest configuration and shared fixtures for the email-syntax test suite.

This module provides fixtures for address corpora and keeps global
settings and logging state from leaking between tests.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from email_syntax.config.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    """Clear the cached settings so environment changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_root_logging() -> Iterator[None]:
    """Detach handlers installed by configure_logging() during a test.

    The CLI binds the root handler to the stream that is sys.stderr at
    call time, which pytest closes once the test finishes.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def address_file(tmp_path: Path) -> Path:
    """Provide a file with a mix of valid and invalid addresses.

    Returns:
        Path to a UTF-8 file with one address per line and a blank line.
    """
    path = tmp_path / "addresses.txt"
    path.write_text(
        "email@here.com\n"
        "\n"
        "John.Doe@exam_ple.com\n"
        "test@domain.with.idn.tld.उदाहरण.परीक्षा\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def valid_address_file(tmp_path: Path) -> Path:
    """Provide a file whose addresses are all valid."""
    path = tmp_path / "valid.txt"
    path.write_text("a@b.com\nemail@[127.0.0.1]\n", encoding="utf-8")
    return path
