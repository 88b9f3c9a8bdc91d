"""Data models for helm-edit."""

from __future__ import annotations

import enum


class ValueScope(enum.Enum):
    RAW = "raw"
    EFFECTIVE = "effective"

    @classmethod
    def from_all_values(cls, all_values: bool) -> ValueScope:
        return cls.EFFECTIVE if all_values else cls.RAW
