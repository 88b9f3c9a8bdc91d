"""Resolve the values document shown to the user for editing."""

from __future__ import annotations

import copy
import logging
from typing import Any

from helm_edit.core.release_store import ReleaseStore
from helm_edit.errors import NotFoundError
from helm_edit.models import ValueScope
from helm_edit.models.release import HelmRelease

logger = logging.getLogger(__name__)


def coalesce_values(defaults: dict, overrides: dict) -> dict:
    """Deep-merge ``overrides`` on top of chart ``defaults``.

    Maps merge key by key; any other override replaces the default whole.
    An override of ``None`` removes a key the defaults define and is kept
    otherwise. Returns a new tree.
    """
    merged: dict[str, Any] = copy.deepcopy(defaults) if defaults else {}
    for key, value in (overrides or {}).items():
        if value is None and key in merged:
            del merged[key]
            continue
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = coalesce_values(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def release_values(release: HelmRelease, scope: ValueScope) -> dict:
    """Values of an already-loaded release, raw or fully computed."""
    if scope is ValueScope.EFFECTIVE:
        return coalesce_values(release.chart.values, release.config)
    return copy.deepcopy(release.config) if release.config else {}


class ValueSource:
    """Reads the values a release was deployed with."""

    def __init__(self, store: ReleaseStore):
        self.store = store

    def get_release(
        self, name: str, revision: int = 0, namespace: str | None = None,
    ) -> HelmRelease:
        if revision < 0:
            raise ValueError(f"revision must be 0 (latest) or positive, got {revision}")
        release = self.store.get_release(name, namespace=namespace, revision=revision)
        if release is None:
            raise NotFoundError(name, revision=revision, namespace=namespace)
        return release

    def resolve(
        self,
        name: str,
        scope: ValueScope = ValueScope.RAW,
        revision: int = 0,
        namespace: str | None = None,
    ) -> dict:
        """Return the raw overrides or the effective values of a release.

        ``revision`` 0 reads the latest revision, any positive number pins an
        older one. Raises NotFoundError when either does not exist.
        """
        release = self.get_release(name, revision=revision, namespace=namespace)
        logger.debug(
            "Resolving %s values of %s revision %d", scope.value, release.name, release.version,
        )
        return release_values(release, scope)
