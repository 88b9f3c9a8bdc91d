"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _default_storage_driver() -> str:
    """Map HELM_DRIVER onto the two storage backends we can read.

    Helm accepts both singular and plural spellings; anything else
    (sql, memory) falls back to secrets, helm's own default.
    """
    driver = os.environ.get("HELM_DRIVER", "").strip().lower()
    if driver in ("configmap", "configmaps"):
        return "configmaps"
    return "secrets"


def _default_fallback_editor() -> str:
    return os.environ.get("HELM_EDITOR", "") or "vi"


@dataclass
class Settings:
    storage_driver: str = field(default_factory=_default_storage_driver)  # "secrets" or "configmaps"
    helm_bin: str = field(default_factory=lambda: os.environ.get("HELM_BIN", "") or "helm")
    namespace: str = field(default_factory=lambda: os.environ.get("HELM_NAMESPACE", ""))
    editor_command: str = "$EDITOR"
    fallback_editor: str = field(default_factory=_default_fallback_editor)
    default_timeout: str = "300s"
    helm_label_selector: str = "owner=helm"
    secret_type: str = "helm.sh/release.v1"
    temp_prefix: str = "helm-edit-"


# Global singleton
settings = Settings()
