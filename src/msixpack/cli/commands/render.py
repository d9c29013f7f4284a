"""`msixpack render` command.

Renders `AppxManifest.xml` from a manifest input file:
- decode (strict; unknown fields hard-error)
- validate (cardinality bounds)
- encode + write (deterministic bytes)

Absent `Properties` elements are omitted by default; `--absent-elements emit`
reproduces the output of older manifest generators.
"""

from __future__ import annotations

from pathlib import Path

import typer
import yaml

from msixpack.build.steps import StepReporter
from msixpack.cli._options import configure_logging, parse_absent_policy
from msixpack.codecs.appx_xml import EncodeOptions, write_appx_manifest
from msixpack.core.validate import validate_manifest
from msixpack.io.manifest_input import read_manifest_file


def register(app: typer.Typer) -> None:
    @app.command("render")
    def render(
        input_path: str = typer.Argument(..., help="Manifest input file (.json, .yaml or .yml)."),
        out: str = typer.Option(..., "--out", help="Output AppxManifest.xml path (or an existing directory)."),
        pretty: bool = typer.Option(False, "--pretty", help="Indent the XML output."),
        absent_elements: str = typer.Option(
            "omit",
            "--absent-elements",
            help="Absent Properties fields: omit the element, or emit an empty one (legacy).",
        ),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Keep step lines and enable debug logging."),
    ) -> None:
        """Render AppxManifest.xml from a manifest input file."""
        policy = parse_absent_policy(absent_elements)
        configure_logging(verbose)

        steps = StepReporter(3, verbose=verbose)
        try:
            steps.start_step("Decode manifest")
            manifest = read_manifest_file(input_path, validate=False)
            steps.end_step()

            steps.start_step("Validate manifest")
            validate_manifest(manifest)
            steps.end_step()

            steps.start_step("Write manifest")
            options = EncodeOptions(absent_elements=policy, pretty=pretty, validate=False)
            out_path = write_appx_manifest(Path(out), manifest, options)
            steps.end_step()
        except (ValueError, yaml.YAMLError) as e:
            steps.close()
            raise typer.BadParameter(str(e)) from e

        typer.echo(str(out_path))
