"""Build-pipeline helpers used around (never inside) the manifest codec.

- `StepReporter`: sequential step timing for CLI output
- `run_command`: external tool invocation with captured-on-failure output
"""

from __future__ import annotations

from .process import CommandError, run_command
from .steps import StepReporter

__all__ = [
    "CommandError",
    "StepReporter",
    "run_command",
]
