"""Run the user's editor on a values file."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Callable

from helm_edit.config.settings import settings
from helm_edit.errors import EditorLaunchError

logger = logging.getLogger(__name__)

EditorLauncher = Callable[[Path, str], None]


def resolve_editor_command(command: str | None) -> list[str]:
    """Expand environment variables and split the command on whitespace.

    An empty result, or one still holding an unset ``$VAR``, falls back
    to the configured editor.
    """
    expanded = os.path.expandvars(command or "").strip()
    if not expanded or expanded.startswith("$"):
        expanded = settings.fallback_editor
    return expanded.split()


def launch_editor(path: Path, command: str | None = None) -> None:
    """Open ``path`` in the editor and block until it exits.

    The editor inherits the terminal's stdin, stdout and stderr.
    """
    argv = resolve_editor_command(command) + [str(path)]
    logger.debug("Launching editor: %s", argv)
    try:
        completed = subprocess.run(argv, check=False)
    except OSError as e:
        raise EditorLaunchError(f"cannot launch editor '{argv[0]}': {e}") from e
    if completed.returncode != 0:
        raise EditorLaunchError(
            f"editor '{argv[0]}' exited with status {completed.returncode}"
        )
