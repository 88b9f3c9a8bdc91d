"""Human-readable summary of how a release's overrides changed."""

from __future__ import annotations

from deepdiff import DeepDiff


def _path(raw: str) -> str:
    # DeepDiff paths look like root['image']['tag'] or root['args'][0]
    path = raw[len("root"):] if raw.startswith("root") else raw
    path = path.replace("']['", ".").replace("['", ".").replace("']", "")
    return path.lstrip(".") or "(root)"


def summarize_changes(before: dict, after: dict) -> list[str]:
    """Describe the differences between two override documents, one per line."""
    diff = DeepDiff(before or {}, after or {}, verbose_level=2)
    details: list[str] = []

    for path, change in diff.get("values_changed", {}).items():
        details.append(f"Changed {_path(path)}: {change['old_value']!r} -> {change['new_value']!r}")

    for path, change in diff.get("type_changes", {}).items():
        details.append(f"Changed {_path(path)}: {change['old_value']!r} -> {change['new_value']!r}")

    for path in diff.get("dictionary_item_added", {}):
        details.append(f"Added {_path(path)}")

    for path in diff.get("dictionary_item_removed", {}):
        details.append(f"Removed {_path(path)}")

    if "iterable_item_added" in diff or "iterable_item_removed" in diff:
        touched = {
            _path(p).rsplit("[", 1)[0]
            for key in ("iterable_item_added", "iterable_item_removed")
            for p in diff.get(key, {})
        }
        details.extend(f"Changed list {p}" for p in sorted(touched))

    return details
