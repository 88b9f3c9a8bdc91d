"""The edit-then-maybe-upgrade cycle for a single release."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from helm_edit.config.settings import settings
from helm_edit.core.editor import EditorLauncher, launch_editor
from helm_edit.core.reconciler import compute_overrides, has_changed
from helm_edit.core.upgrade_executor import HelmUpgradeExecutor
from helm_edit.core.value_source import ValueSource, release_values
from helm_edit.models import ValueScope
from helm_edit.models.edit import EditOptions, NoChangeMade, Outcome, Upgraded
from helm_edit.models.release import HelmRelease
from helm_edit.utils.yaml_codec import marshal, unmarshal

logger = logging.getLogger(__name__)


def _edit_document(release: HelmRelease, presented: str, editor: EditorLauncher, command: str) -> bytes:
    """Write ``presented`` to a scratch file, let the user edit it, read it back."""
    with tempfile.TemporaryDirectory(prefix=settings.temp_prefix) as tmp:
        path = Path(tmp) / f"{release.name}-values.yaml"
        path.write_text(presented, encoding="utf-8")
        editor(path, command)
        return path.read_bytes()


def edit_and_maybe_upgrade(
    release_name: str,
    options: EditOptions,
    *,
    source: ValueSource,
    executor: HelmUpgradeExecutor,
    editor: EditorLauncher = launch_editor,
) -> Outcome:
    """Let the user edit a release's values and upgrade it if anything changed.

    The latest revision supplies the chart; ``options.revision`` only picks
    which revision's values are shown. When the saved file is byte-identical
    to what was presented nothing is upgraded. Otherwise the edited values,
    minus anything equal to the chart defaults unless
    ``options.disable_default_subtraction`` is set, become the new overrides.
    """
    release = source.get_release(release_name, namespace=options.namespace)
    scope = ValueScope.from_all_values(options.all_values)
    if options.revision:
        shown = source.resolve(
            release_name, scope=scope, revision=options.revision, namespace=release.namespace,
        )
    else:
        shown = release_values(release, scope)

    presented = marshal(shown)
    edited_raw = _edit_document(release, presented, editor, options.editor_command)

    if not has_changed(presented, edited_raw):
        logger.info("No changes made to %s", release.name)
        return NoChangeMade()

    edited = unmarshal(edited_raw, source=f"edited values of {release.name}")
    if options.disable_default_subtraction:
        overrides = edited
    else:
        overrides = compute_overrides(edited, release.chart.values)
    logger.debug("Overrides to apply: %s", overrides)

    upgraded = executor.upgrade(release, overrides, wait=options.wait, timeout=options.timeout)
    return Upgraded(
        release_name=release.name,
        notes=upgraded.notes,
        revision=upgraded.version,
        previous_overrides=dict(release.config),
        overrides=overrides,
    )
