"""msixpack CLI entrypoint (Typer)."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="msixpack",
    add_completion=False,
    no_args_is_help=True,
    help="Render and validate APPX/MSIX package manifests.",
)


@app.callback()
def _callback() -> None:
    """msixpack CLI."""
    # Intentionally empty; subcommands are registered below.
    return


@app.command("version")
def version() -> None:
    """Print the installed msixpack version."""
    from msixpack import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `msixpack --help` is fast.
    """
    from msixpack.cli.commands import pack as pack_cmd
    from msixpack.cli.commands import render as render_cmd
    from msixpack.cli.commands import validate as validate_cmd

    validate_cmd.register(app)
    render_cmd.register(app)
    pack_cmd.register(app)


_register_commands()
