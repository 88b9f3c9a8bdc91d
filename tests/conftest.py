"""Shared fixtures: in-memory release store, editor and upgrade executor."""

from __future__ import annotations

from pathlib import Path

import pytest

from helm_edit.core.value_source import ValueSource
from helm_edit.models.chart import ChartMetadata, HelmChart
from helm_edit.models.release import HelmRelease, ReleaseInfo, ReleaseStatus


def make_release(
    name: str = "web",
    version: int = 1,
    defaults: dict | None = None,
    config: dict | None = None,
    namespace: str = "default",
) -> HelmRelease:
    return HelmRelease(
        name=name,
        namespace=namespace,
        version=version,
        info=ReleaseInfo(status=ReleaseStatus.DEPLOYED, notes=f"notes for revision {version}"),
        chart=HelmChart(
            metadata=ChartMetadata(name="nginx", version="1.2.3", raw={"apiVersion": "v2", "name": "nginx", "version": "1.2.3"}),
            values=defaults if defaults is not None else {},
        ),
        config=config if config is not None else {},
    )


class FakeStore:
    def __init__(self, releases: list[HelmRelease]):
        self.releases = releases

    def get_release(self, name: str, namespace: str | None = None, revision: int = 0) -> HelmRelease | None:
        matches = [
            r for r in self.releases
            if r.name == name and (namespace is None or r.namespace == namespace)
        ]
        if revision:
            matches = [r for r in matches if r.version == revision]
        if not matches:
            return None
        return max(matches, key=lambda r: r.version)


class FakeExecutor:
    def __init__(self, error: Exception | None = None):
        self.calls: list[dict] = []
        self.error = error

    def upgrade(self, release: HelmRelease, overrides: dict, wait: bool = False, timeout: float = 300.0) -> HelmRelease:
        self.calls.append({"release": release, "overrides": overrides, "wait": wait, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return HelmRelease(
            name=release.name,
            namespace=release.namespace,
            version=release.version + 1,
            info=ReleaseInfo(status=ReleaseStatus.DEPLOYED, notes="Thank you for installing nginx."),
        )


class ScriptedEditor:
    """Stands in for the editor process: records what it saw, optionally rewrites the file."""

    def __init__(self, new_text: str | None = None, error: Exception | None = None):
        self.new_text = new_text
        self.error = error
        self.paths: list[Path] = []
        self.commands: list[str] = []
        self.seen: list[str] = []

    def __call__(self, path: Path, command: str) -> None:
        self.paths.append(path)
        self.commands.append(command)
        self.seen.append(path.read_text(encoding="utf-8"))
        if self.error is not None:
            raise self.error
        if self.new_text is not None:
            path.write_text(self.new_text, encoding="utf-8")


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def source_for():
    def _build(*releases: HelmRelease) -> ValueSource:
        return ValueSource(FakeStore(list(releases)))
    return _build
