"""Work out which edited values are worth persisting as overrides."""

from __future__ import annotations

import logging
from typing import Any

from helm_edit.models.values import MappingNode, Node, from_node, nodes_equal, to_node

logger = logging.getLogger(__name__)


def _subtract(edited: MappingNode, defaults: MappingNode) -> MappingNode:
    entries: list[tuple[Any, Node]] = []
    for key, value in edited.entries:
        default = defaults.get(key)
        if default is None:
            entries.append((key, value))
            continue
        if nodes_equal(value, default):
            continue
        if isinstance(value, MappingNode) and isinstance(default, MappingNode):
            entries.append((key, _subtract(value, default)))
        else:
            entries.append((key, value))
    return MappingNode(tuple(entries))


def compute_overrides(edited: Any, defaults: Any) -> Any:
    """Return the part of ``edited`` that differs from the chart ``defaults``.

    Keys whose value equals the default are dropped; nested maps that differ
    are diffed recursively, anything else is kept whole. Keys the user
    deleted are not reinstated. A non-map document is returned as is.
    Neither argument is modified.
    """
    edited_node = to_node(edited)
    defaults_node = to_node(defaults if defaults is not None else {})
    if not isinstance(edited_node, MappingNode) or not isinstance(defaults_node, MappingNode):
        return from_node(edited_node)

    result = _subtract(edited_node, defaults_node)
    logger.debug(
        "Kept %d of %d top-level keys after removing chart defaults",
        len(result), len(edited_node),
    )
    return from_node(result)


def has_changed(before: str | bytes, after: str | bytes) -> bool:
    """Return True unless both serialized documents are byte-identical."""
    if isinstance(before, str):
        before = before.encode("utf-8")
    if isinstance(after, str):
        after = after.encode("utf-8")
    return before != after
