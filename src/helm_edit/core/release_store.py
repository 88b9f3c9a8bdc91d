"""Look up releases and their revisions in Helm's storage backend."""

from __future__ import annotations

import logging
from collections import defaultdict

from helm_edit.config.settings import settings
from helm_edit.core.helm_decoder import decoder_for_driver, quick_metadata_from_labels
from helm_edit.core.k8s_client import K8sClient
from helm_edit.errors import HelmEditError
from helm_edit.models.release import HelmRelease

logger = logging.getLogger(__name__)


class ReleaseStore:
    """Fetches Helm releases from the cluster."""

    def __init__(self, k8s: K8sClient):
        self.k8s = k8s

    def _list_objects(self, name: str, namespace: str | None) -> list:
        if settings.storage_driver == "configmaps":
            return self.k8s.list_helm_configmaps(namespace=namespace, release_name=name)
        return self.k8s.list_helm_secrets(namespace=namespace, release_name=name)

    def get_release(
        self,
        name: str,
        namespace: str | None = None,
        revision: int = 0,
    ) -> HelmRelease | None:
        """Get one revision of a release; revision 0 means the latest.

        With no namespace every namespace is searched, and a release name
        that exists in more than one of them is an error.
        """
        objects = self._list_objects(name, namespace)
        if not objects:
            return None

        by_namespace: dict[str, list] = defaultdict(list)
        for obj in objects:
            meta = quick_metadata_from_labels(obj)
            by_namespace[meta["namespace"]].append((meta["version"], obj))

        if len(by_namespace) > 1:
            found = ", ".join(sorted(by_namespace))
            raise HelmEditError(
                f"release '{name}' exists in several namespaces ({found}); pass --namespace"
            )

        versions = next(iter(by_namespace.values()))
        if revision:
            candidates = [obj for v, obj in versions if v == revision]
        else:
            versions.sort(key=lambda x: x[0], reverse=True)
            candidates = [versions[0][1]]
        if not candidates:
            return None

        decode_fn = decoder_for_driver()
        release = decode_fn(candidates[0], context=self.k8s.active_context_name)
        if release is not None:
            logger.debug(
                "Loaded release %s/%s revision %d", release.namespace, release.name, release.version,
            )
        return release
