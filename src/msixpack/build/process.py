"""External command runner.

Non-verbose: stdout/stderr are captured and surfaced only when the command
exits non-zero, verbatim, inside the `CommandError` message.
Verbose: output streams straight to the terminal; only the exit status is checked.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    """An external command could not be started or exited non-zero."""

    def __init__(self, message: str, *, returncode: Optional[int] = None) -> None:
        super().__init__(message)
        self.returncode = returncode


def _display(args: Sequence[str]) -> str:
    return shlex.join([str(a) for a in args])


def run_command(
    args: Sequence[str | Path],
    *,
    verbose: bool = False,
    cwd: Optional[str | Path] = None,
) -> None:
    """Run `args` and raise `CommandError` unless it exits with status 0."""
    argv = [str(a) for a in args]
    shown = _display(argv)
    logger.debug("running %s", shown)
    try:
        if verbose:
            proc = subprocess.run(argv, cwd=cwd, check=False)
        else:
            proc = subprocess.run(argv, cwd=cwd, check=False, capture_output=True, text=True)
    except OSError as e:
        raise CommandError(f"while running `{shown}`: {e}") from e

    if proc.returncode == 0:
        return

    message = f"process didn't exit successfully: `{shown}` (exit code: {proc.returncode})"
    if not verbose:
        message += f"\n--- stdout\n{proc.stdout or ''}--- stderr\n{proc.stderr or ''}"
    raise CommandError(message, returncode=proc.returncode)


__all__ = ["CommandError", "run_command"]
