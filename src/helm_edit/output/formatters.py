"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json

from rich.console import Console

from helm_edit.models.edit import NoChangeMade, Outcome
from helm_edit.utils.yaml_codec import marshal

console = Console()
err_console = Console(stderr=True)


def output_values(values: dict, fmt: str, title: str = "User-Supplied Values") -> None:
    if fmt == "json":
        console.print_json(json.dumps(values, indent=2, default=str))
    elif fmt == "yaml":
        # Plain text so the output can be fed straight back to helm -f
        console.print(marshal(values), end="", markup=False, highlight=False)
    else:
        from helm_edit.output.tables import values_panel
        console.print(values_panel(values, title=title))


def output_outcome(outcome: Outcome, changes: list[str] | None = None) -> None:
    if isinstance(outcome, NoChangeMade):
        console.print(f"[yellow]{outcome.message}[/yellow]")
        return

    console.print(f"[green]{outcome.message}[/green]")
    if changes:
        from helm_edit.output.tables import changes_table
        console.print(changes_table(changes, revision=outcome.revision))
    if outcome.notes:
        console.print(outcome.notes, markup=False, highlight=False)


def output_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}", highlight=False)
