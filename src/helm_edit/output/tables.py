"""Rich renderables for values and change summaries."""

from __future__ import annotations

from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from helm_edit.utils.yaml_codec import marshal


def values_panel(values: dict, title: str = "User-Supplied Values") -> Panel:
    text = marshal(values) if values else "(no values)"
    syntax = Syntax(text, "yaml", theme="monokai", line_numbers=False)
    return Panel(syntax, title=f"[bold]{title}[/bold]", border_style="green")


def changes_table(changes: list[str], revision: int = 0) -> Table:
    title = f"Override Changes (revision {revision})" if revision else "Override Changes"
    table = Table(title=title, expand=False, show_header=False)
    table.add_column("Change")
    for line in changes:
        table.add_row(line)
    return table
