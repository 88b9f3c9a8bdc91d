"""Exceptions raised by the edit workflow."""

from __future__ import annotations


class HelmEditError(Exception):
    """Base class for all helm-edit failures."""


class NotFoundError(HelmEditError):
    """The release, or the requested revision of it, does not exist."""

    def __init__(self, release: str, revision: int = 0, namespace: str | None = None):
        self.release = release
        self.revision = revision
        self.namespace = namespace
        where = f" in namespace '{namespace}'" if namespace else ""
        if revision:
            msg = f"release '{release}' revision {revision} not found{where}"
        else:
            msg = f"release '{release}' not found{where}"
        super().__init__(msg)


class EditorLaunchError(HelmEditError):
    """The editor could not be started or exited with a non-zero status."""


class CodecError(HelmEditError):
    """A values document could not be parsed or serialized."""


class UpgradeError(HelmEditError):
    """helm upgrade failed or returned something we could not read."""
