"""helm-edit values <release> - Show a release's values."""

from __future__ import annotations

from typing import Optional

import typer

from helm_edit.cli.options import (
    AllValuesOption, ContextOption, NamespaceOption, OutputOption, RevisionOption, resolve_namespace,
)
from helm_edit.core.k8s_client import K8sClient
from helm_edit.core.release_store import ReleaseStore
from helm_edit.core.value_source import ValueSource
from helm_edit.errors import HelmEditError
from helm_edit.models import ValueScope
from helm_edit.output.formatters import output_error, output_values


def values(
    release: str = typer.Argument(help="Release name"),
    output: str = OutputOption,
    namespace: Optional[str] = NamespaceOption,
    context: Optional[str] = ContextOption,
    all_values: bool = AllValuesOption,
    revision: int = RevisionOption,
) -> None:
    """Show the values a release would be edited with."""
    source = ValueSource(ReleaseStore(K8sClient(context=context)))
    scope = ValueScope.from_all_values(all_values)
    try:
        doc = source.resolve(release, scope=scope, revision=revision, namespace=resolve_namespace(namespace))
    except HelmEditError as e:
        output_error(str(e))
        raise typer.Exit(code=1)

    title = "Computed Values" if scope is ValueScope.EFFECTIVE else "User-Supplied Values"
    output_values(doc, output, title=title)
