"""Options and outcomes of an edit session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass
class EditOptions:
    all_values: bool = False
    revision: int = 0
    editor_command: str = "$EDITOR"
    disable_default_subtraction: bool = False
    wait: bool = False
    timeout: float = 300.0
    namespace: str | None = None


@dataclass(frozen=True)
class NoChangeMade:
    message: str = "Edit cancelled, no changes made!"


@dataclass(frozen=True)
class Upgraded:
    release_name: str
    notes: str = ""
    revision: int = 0
    previous_overrides: dict | None = None
    overrides: dict | None = None

    @property
    def message(self) -> str:
        return f'Release "{self.release_name}" has been edited. Happy Helming!'


Outcome = Union[NoChangeMade, Upgraded]
