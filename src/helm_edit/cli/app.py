"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="helm-edit",
    help="Edit the values of a deployed Helm release and upgrade it when they change.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # The kubernetes client logs every request at DEBUG
    logging.getLogger("kubernetes").setLevel(logging.INFO if verbose else logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    _configure_logging(verbose)


def _register_commands() -> None:
    from helm_edit.cli.commands.edit_cmd import edit
    from helm_edit.cli.commands.values_cmd import values

    app.command(name="edit", help="Edit a release's values and upgrade it")(edit)
    app.command(name="values", help="Show the values that would be edited")(values)


_register_commands()


def main() -> None:
    app()
