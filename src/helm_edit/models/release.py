"""Helm release models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from helm_edit.models.chart import HelmChart


class ReleaseStatus(enum.Enum):
    DEPLOYED = "deployed"
    FAILED = "failed"
    SUPERSEDED = "superseded"
    PENDING_INSTALL = "pending-install"
    PENDING_UPGRADE = "pending-upgrade"
    PENDING_ROLLBACK = "pending-rollback"
    UNINSTALLING = "uninstalling"
    UNINSTALLED = "uninstalled"
    UNKNOWN = "unknown"

    @classmethod
    def from_str(cls, s: str) -> ReleaseStatus:
        for member in cls:
            if member.value == s:
                return member
        return cls.UNKNOWN


@dataclass
class ReleaseInfo:
    last_deployed: str = ""
    status: ReleaseStatus = ReleaseStatus.UNKNOWN
    description: str = ""
    notes: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> ReleaseInfo:
        if not d:
            return cls()
        return cls(
            last_deployed=d.get("last_deployed", ""),
            status=ReleaseStatus.from_str(d.get("status", "unknown")),
            description=d.get("description", ""),
            notes=d.get("notes", ""),
        )


@dataclass
class HelmRelease:
    """One revision of a release, decoded from Helm's storage object."""

    name: str = ""
    namespace: str = ""
    version: int = 0
    context: str = ""
    info: ReleaseInfo = field(default_factory=ReleaseInfo)
    chart: HelmChart = field(default_factory=HelmChart)
    config: dict = field(default_factory=dict)

    @property
    def chart_name(self) -> str:
        return self.chart.metadata.name

    @property
    def notes(self) -> str:
        return self.info.notes

    @classmethod
    def from_dict(cls, d: dict, context: str = "") -> HelmRelease:
        return cls(
            name=d.get("name", ""),
            namespace=d.get("namespace", ""),
            version=d.get("version", 0),
            context=context,
            info=ReleaseInfo.from_dict(d.get("info") or {}),
            chart=HelmChart.from_dict(d.get("chart") or {}),
            config=d.get("config") or {},
        )
