"""helm-edit edit <release> - Edit values and upgrade on change."""

from __future__ import annotations

from typing import Optional

import typer

from helm_edit.cli.options import (
    AllValuesOption, ContextOption, NamespaceOption, resolve_namespace,
)
from helm_edit.config.settings import settings
from helm_edit.core.edit_workflow import edit_and_maybe_upgrade
from helm_edit.core.k8s_client import K8sClient
from helm_edit.core.release_store import ReleaseStore
from helm_edit.core.upgrade_executor import HelmUpgradeExecutor
from helm_edit.core.value_source import ValueSource
from helm_edit.errors import HelmEditError
from helm_edit.models.edit import EditOptions, Upgraded
from helm_edit.output.formatters import output_error, output_outcome
from helm_edit.utils.duration import parse_duration
from helm_edit.utils.values_diff import summarize_changes


def _parse_timeout(value: str) -> float:
    try:
        return parse_duration(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def edit(
    release: str = typer.Argument(help="Release name"),
    namespace: Optional[str] = NamespaceOption,
    context: Optional[str] = ContextOption,
    all_values: bool = AllValuesOption,
    revision: int = typer.Option(
        0, "--revision", min=0, help="Edit the current chart with the values of an older revision",
    ),
    editor: str = typer.Option(
        settings.editor_command, "--editor", "-e", help="Editor command; environment variables are expanded",
    ),
    disable_default_subtraction: bool = typer.Option(
        False, "--disable-default-subtraction", "-m",
        help="Keep edited values even when they equal the chart defaults "
             "(combined with --all every computed value becomes user-supplied)",
    ),
    wait: bool = typer.Option(
        False, "--wait", help="Wait until all resources are ready before marking the release successful",
    ),
    timeout: str = typer.Option(
        settings.default_timeout, "--timeout", help="Time to wait for any individual Kubernetes operation",
    ),
) -> None:
    """Open a release's values in an editor and upgrade the release if they changed."""
    options = EditOptions(
        all_values=all_values,
        revision=revision,
        editor_command=editor,
        disable_default_subtraction=disable_default_subtraction,
        wait=wait,
        timeout=_parse_timeout(timeout),
        namespace=resolve_namespace(namespace),
    )
    source = ValueSource(ReleaseStore(K8sClient(context=context)))
    executor = HelmUpgradeExecutor(kube_context=context)

    try:
        outcome = edit_and_maybe_upgrade(release, options, source=source, executor=executor)
    except HelmEditError as e:
        output_error(str(e))
        raise typer.Exit(code=1)

    changes = None
    if isinstance(outcome, Upgraded):
        changes = summarize_changes(outcome.previous_overrides or {}, outcome.overrides or {})
    output_outcome(outcome, changes)
