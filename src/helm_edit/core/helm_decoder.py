"""Decode Helm v3 release data from Kubernetes Secrets or ConfigMaps."""

from __future__ import annotations

import binascii
import logging
from typing import Any, Callable

from helm_edit.config.settings import settings
from helm_edit.models.release import HelmRelease
from helm_edit.utils.encoding import decode_release_configmap, decode_release_secret

logger = logging.getLogger(__name__)

Decoder = Callable[..., "HelmRelease | None"]

# Payload corruption we tolerate by skipping the object
_DECODE_ERRORS = (binascii.Error, OSError, EOFError, ValueError, UnicodeDecodeError, TypeError)


def _label_metadata(obj: Any) -> dict[str, str]:
    labels = {}
    if getattr(obj, "metadata", None) and obj.metadata.labels:
        labels = dict(obj.metadata.labels)
    return labels


def decode_secret(secret: Any, context: str = "") -> HelmRelease | None:
    """Decode a single Kubernetes Secret into a HelmRelease."""
    data = secret.data
    if not data or "release" not in data:
        return None
    raw = data["release"]
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    try:
        release_dict = decode_release_secret(raw)
    except _DECODE_ERRORS:
        logger.debug("Failed to decode secret %s", _safe_name(secret), exc_info=True)
        return None
    release = HelmRelease.from_dict(release_dict, context=context)
    if not release.namespace and secret.metadata:
        release.namespace = secret.metadata.namespace or ""
    return release


def decode_configmap(cm: Any, context: str = "") -> HelmRelease | None:
    """Decode a single Kubernetes ConfigMap into a HelmRelease."""
    data = cm.data
    if not data or "release" not in data:
        return None
    try:
        release_dict = decode_release_configmap(data["release"])
    except _DECODE_ERRORS:
        logger.debug("Failed to decode configmap %s", _safe_name(cm), exc_info=True)
        return None
    release = HelmRelease.from_dict(release_dict, context=context)
    if not release.namespace and cm.metadata:
        release.namespace = cm.metadata.namespace or ""
    return release


def decoder_for_driver(driver: str | None = None) -> Decoder:
    driver = driver or settings.storage_driver
    return decode_configmap if driver == "configmaps" else decode_secret


def quick_metadata_from_labels(obj: Any) -> dict:
    """Read name, namespace and revision from labels without decoding the payload."""
    labels = _label_metadata(obj)
    ns = ""
    if getattr(obj, "metadata", None):
        ns = obj.metadata.namespace or ""
    try:
        version = int(labels.get("version", "0"))
    except ValueError:
        version = 0
    return {
        "name": labels.get("name", ""),
        "namespace": ns,
        "status": labels.get("status", ""),
        "version": version,
    }


def _safe_name(obj: Any) -> str:
    if getattr(obj, "metadata", None):
        return obj.metadata.name or "<unknown>"
    return "<unknown>"
