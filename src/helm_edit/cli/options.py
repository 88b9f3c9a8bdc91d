"""Shared CLI options."""

from __future__ import annotations

import typer

from helm_edit.config.settings import settings

OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml")
NamespaceOption = typer.Option(
    None, "--namespace", "-n", help="Kubernetes namespace (default: $HELM_NAMESPACE, else search all)",
)
ContextOption = typer.Option(None, "--context", help="Kubernetes context name")
AllValuesOption = typer.Option(False, "--all", "-a", help="Use all (computed) values, not only user-supplied ones")
RevisionOption = typer.Option(0, "--revision", min=0, help="Take the values from this revision (0 = latest)")


def resolve_namespace(namespace: str | None) -> str | None:
    return namespace or settings.namespace or None
