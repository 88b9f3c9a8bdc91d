"""Chart models, as stored inside a Helm release."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ChartMetadata:
    name: str = ""
    version: str = ""
    app_version: str = ""
    description: str = ""
    api_version: str = ""
    chart_type: str = ""
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict) -> ChartMetadata:
        if not d:
            return cls()
        return cls(
            name=d.get("name", ""),
            version=d.get("version", ""),
            app_version=d.get("appVersion", ""),
            description=d.get("description", ""),
            api_version=d.get("apiVersion", ""),
            chart_type=d.get("type", ""),
            raw=dict(d),
        )

    @property
    def dependencies(self) -> list[dict]:
        return self.raw.get("dependencies") or []


@dataclass
class ChartFile:
    """A template or auxiliary file; ``data`` holds the decoded bytes."""

    name: str
    data: bytes = b""

    @classmethod
    def from_dict(cls, d: dict) -> ChartFile:
        raw = d.get("data") or ""
        return cls(name=d.get("name", ""), data=base64.b64decode(raw))


@dataclass
class HelmChart:
    metadata: ChartMetadata = field(default_factory=ChartMetadata)
    values: dict[str, Any] = field(default_factory=dict)
    templates: list[ChartFile] = field(default_factory=list)
    files: list[ChartFile] = field(default_factory=list)
    schema: bytes = b""

    @classmethod
    def from_dict(cls, d: dict) -> HelmChart:
        if not d:
            return cls()
        schema = d.get("schema") or ""
        return cls(
            metadata=ChartMetadata.from_dict(d.get("metadata") or {}),
            values=d.get("values") or {},
            templates=[ChartFile.from_dict(t) for t in d.get("templates") or []],
            files=[ChartFile.from_dict(f) for f in d.get("files") or []],
            schema=base64.b64decode(schema) if schema else b"",
        )
