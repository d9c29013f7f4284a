"""`msixpack pack` command.

Writes `AppxManifest.xml` into a staging directory, then hands the directory to
an external packaging tool (default: `makeappx pack /d <stage> /p <out> /o`).

Asset collection and signing are not done here; the staging directory must
already contain the files the manifest references.

Exit codes:
- 2: manifest input is invalid
- 1: the packaging tool failed (its captured output is printed)
"""

from __future__ import annotations

from pathlib import Path

import typer
import yaml

from msixpack.build.process import CommandError, run_command
from msixpack.build.steps import StepReporter
from msixpack.cli._options import configure_logging, parse_absent_policy
from msixpack.codecs.appx_xml import EncodeOptions, write_appx_manifest
from msixpack.io.manifest_input import read_manifest_file


def packer_args(tool: str, stage: Path, out: Path) -> list[str]:
    """Command line for `makeappx`-compatible packers."""
    return [tool, "pack", "/d", str(stage), "/p", str(out), "/o"]


def register(app: typer.Typer) -> None:
    @app.command("pack")
    def pack(
        input_path: str = typer.Argument(..., help="Manifest input file (.json, .yaml or .yml)."),
        stage: str = typer.Option(..., "--stage", help="Staging directory holding the package payload."),
        out: str = typer.Option(..., "--out", help="Output package path (.msix/.appx)."),
        tool: str = typer.Option("makeappx", "--tool", help="makeappx-compatible packaging tool."),
        absent_elements: str = typer.Option(
            "omit",
            "--absent-elements",
            help="Absent Properties fields: omit the element, or emit an empty one (legacy).",
        ),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Stream tool output and enable debug logging."),
    ) -> None:
        """Write AppxManifest.xml into a staging directory and run the packaging tool."""
        policy = parse_absent_policy(absent_elements)
        configure_logging(verbose)

        stage_dir = Path(stage)
        out_path = Path(out)

        steps = StepReporter(3, verbose=verbose)
        try:
            steps.start_step("Decode manifest")
            manifest = read_manifest_file(input_path)
            steps.end_step()

            steps.start_step("Write manifest")
            stage_dir.mkdir(parents=True, exist_ok=True)
            write_appx_manifest(stage_dir, manifest, EncodeOptions(absent_elements=policy))
            steps.end_step()
        except (ValueError, yaml.YAMLError) as e:
            steps.close()
            raise typer.BadParameter(str(e)) from e

        steps.start_step("Run packaging tool")
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            run_command(packer_args(tool, stage_dir, out_path), verbose=verbose)
        except CommandError as e:
            steps.close()
            typer.echo(str(e), err=True)
            raise typer.Exit(code=1) from e
        steps.end_step()

        typer.echo(str(out_path))
