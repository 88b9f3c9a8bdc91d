"""Kubernetes API wrapper."""

from __future__ import annotations

from typing import Any

from kubernetes import client, config

from helm_edit.config.settings import settings


class K8sClient:
    """Thin wrapper around the Kubernetes Python client."""

    def __init__(self, context: str | None = None):
        self.context = context
        self._core_v1: client.CoreV1Api | None = None
        self._api_client: client.ApiClient | None = None

    def _load_config(self) -> client.ApiClient:
        if self._api_client is not None:
            return self._api_client
        try:
            cfg = client.Configuration()
            config.load_kube_config(
                context=self.context,
                client_configuration=cfg,
            )
            # Prevent indefinite hangs on unreachable clusters
            cfg.retries = 1
            self._api_client = client.ApiClient(configuration=cfg)
        except config.ConfigException:
            config.load_incluster_config()
            self._api_client = client.ApiClient()
        return self._api_client

    @property
    def core_v1(self) -> client.CoreV1Api:
        if self._core_v1 is None:
            self._core_v1 = client.CoreV1Api(api_client=self._load_config())
        return self._core_v1

    @property
    def active_context_name(self) -> str:
        if self.context:
            return self.context
        try:
            _, ctx = config.list_kube_config_contexts()
            return ctx.get("name", "unknown") if ctx else "unknown"
        except config.ConfigException:
            return "in-cluster"

    def list_helm_secrets(
        self, namespace: str | None = None, release_name: str | None = None,
    ) -> list[Any]:
        """List Helm release secrets, optionally filtered by namespace and release name."""
        label = settings.helm_label_selector
        if release_name:
            label += f",name={release_name}"
        if namespace:
            result = self.core_v1.list_namespaced_secret(
                namespace=namespace,
                label_selector=label,
                field_selector=f"type={settings.secret_type}",
                _request_timeout=30,
            )
        else:
            result = self.core_v1.list_secret_for_all_namespaces(
                label_selector=label,
                field_selector=f"type={settings.secret_type}",
                _request_timeout=30,
            )
        return result.items

    def list_helm_configmaps(
        self, namespace: str | None = None, release_name: str | None = None,
    ) -> list[Any]:
        """List Helm release ConfigMaps."""
        label = settings.helm_label_selector
        if release_name:
            label += f",name={release_name}"
        if namespace:
            result = self.core_v1.list_namespaced_config_map(
                namespace=namespace,
                label_selector=label,
                _request_timeout=30,
            )
        else:
            result = self.core_v1.list_config_map_for_all_namespaces(
                label_selector=label,
                _request_timeout=30,
            )
        return result.items
