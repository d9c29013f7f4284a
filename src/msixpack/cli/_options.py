"""Option parsing and logging setup shared by CLI commands."""

from __future__ import annotations

import logging

import typer

from msixpack.core.wrapper import AbsentElementPolicy

LOG_FORMAT = "[%(levelname)s] %(message)s"


def parse_absent_policy(value: str) -> AbsentElementPolicy:
    """Parse `--absent-elements` (omit|emit)."""
    try:
        return AbsentElementPolicy(value.strip().lower())
    except ValueError:
        raise typer.BadParameter("absent-elements must be 'omit' or 'emit'") from None


def configure_logging(verbose: bool) -> None:
    """Route msixpack debug logs to stderr when `--verbose` is set."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
