"""Sequential step reporter for CLI builds.

Prints one line per step:

    [1/4] Decode manifest            <- while running (non-verbose: erased)
    [1/4] Decode manifest [3ms]      <- when finished
    [2/4] Validate manifest [SKIPPED]

Starting a new step while one is still open closes the open one as skipped.
In verbose mode the in-progress line is kept, since other output (tool logs)
may follow it.
"""

from __future__ import annotations

import sys
import time
from typing import IO, Optional

import typer

# ANSI: cursor up one line, then erase that line.
_CLEAR_LAST_LINE = "\x1b[1A\x1b[2K"


class StepReporter:
    def __init__(self, total: int, *, verbose: bool = False, stream: Optional[IO[str]] = None) -> None:
        if total < 1:
            raise ValueError("StepReporter: total must be >= 1")
        self.total = total
        self.verbose = verbose
        self._stream = stream
        self._current = 0
        self._label = ""
        self._started_at = 0.0
        self._open = False

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def completed(self) -> int:
        """Number of steps finished or skipped so far."""
        return self._current

    def _step_id(self) -> str:
        return typer.style(f"[{self._current + 1}/{self.total}]", bold=True)

    def _echo(self, message: str) -> None:
        typer.echo(message, file=self.stream)

    def start_step(self, label: str) -> None:
        """Begin timing `label`, closing any unfinished step as skipped."""
        if self._open:
            self._finish(skipped=True, clear_last=True)
        self._label = label
        self._started_at = time.perf_counter()
        self._open = True
        self._echo(f"{self._step_id()} {label}")

    def end_step(self, verbose: Optional[bool] = None) -> None:
        """Finish the open step and print its elapsed time.

        `verbose` overrides the reporter default for this step only; when not
        verbose the in-progress line is erased before the final line is printed.
        """
        if not self._open:
            raise RuntimeError("StepReporter.end_step: no step in progress")
        keep = self.verbose if verbose is None else verbose
        self._finish(skipped=False, clear_last=not keep)

    def close(self) -> None:
        """Mark a trailing unfinished step as skipped."""
        if self._open:
            self._finish(skipped=True, clear_last=True)

    def _finish(self, *, skipped: bool, clear_last: bool) -> None:
        self._open = False
        if clear_last:
            # raw write: click strips ANSI sequences from non-tty streams
            self.stream.write(_CLEAR_LAST_LINE)
        if skipped:
            status = typer.style("[SKIPPED]", fg=typer.colors.YELLOW)
        else:
            elapsed_ms = int((time.perf_counter() - self._started_at) * 1000)
            status = typer.style(f"[{elapsed_ms}ms]", fg=typer.colors.GREEN)
        self._echo(f"{self._step_id()} {self._label} {status}")
        self._current += 1


__all__ = ["StepReporter"]
