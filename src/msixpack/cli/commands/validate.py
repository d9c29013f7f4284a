"""`msixpack validate` command.

Decodes a manifest input file with the strict decoder and checks document-level
cardinality. Prints `OK` on success; any manifest error exits with code 2.
"""

from __future__ import annotations

import typer
import yaml

from msixpack.cli._options import configure_logging
from msixpack.io.manifest_input import read_manifest_file


def register(app: typer.Typer) -> None:
    @app.command("validate")
    def validate(
        input_path: str = typer.Argument(..., help="Manifest input file (.json, .yaml or .yml)."),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    ) -> None:
        """Validate a manifest input file."""
        configure_logging(verbose)
        try:
            read_manifest_file(input_path)
        except (ValueError, yaml.YAMLError) as e:
            raise typer.BadParameter(str(e)) from e

        typer.echo("OK")
