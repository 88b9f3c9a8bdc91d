"""Tagged value-tree nodes and structural equality."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ScalarNode:
    value: Any = None


@dataclass(frozen=True)
class SequenceNode:
    items: tuple[Node, ...] = ()


@dataclass(frozen=True)
class MappingNode:
    entries: tuple[tuple[Any, Node], ...] = ()

    def keys(self) -> list:
        return [k for k, _ in self.entries]

    def get(self, key: Any) -> Node | None:
        for k, v in self.entries:
            if k == key:
                return v
        return None

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)


Node = Union[ScalarNode, SequenceNode, MappingNode]


def to_node(value: Any) -> Node:
    """Convert a plain YAML/JSON tree into tagged nodes."""
    if isinstance(value, (MappingNode, SequenceNode, ScalarNode)):
        return value
    if isinstance(value, dict):
        return MappingNode(tuple((k, to_node(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return SequenceNode(tuple(to_node(v) for v in value))
    return ScalarNode(value)


def from_node(node: Node) -> Any:
    """Convert tagged nodes back into a fresh plain tree."""
    if isinstance(node, MappingNode):
        return {k: from_node(v) for k, v in node.entries}
    if isinstance(node, SequenceNode):
        return [from_node(v) for v in node.items]
    return node.value


def _scalars_equal(a: Any, b: Any) -> bool:
    # bool is a subclass of int, so it has to be checked first
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if a is None or b is None:
        return a is None and b is None
    a_num = isinstance(a, (int, float))
    b_num = isinstance(b, (int, float))
    if a_num or b_num:
        return a_num and b_num and a == b
    return type(a) is type(b) and a == b


def nodes_equal(a: Node, b: Node) -> bool:
    """Structural equality over tagged nodes.

    Numbers compare by value regardless of int/float, booleans never equal
    numbers, null only equals null. Mappings ignore key order, sequences
    do not.
    """
    if isinstance(a, MappingNode):
        if not isinstance(b, MappingNode) or len(a) != len(b):
            return False
        for key, value in a.entries:
            other = b.get(key)
            if other is None or not nodes_equal(value, other):
                return False
        return True
    if isinstance(a, SequenceNode):
        if not isinstance(b, SequenceNode) or len(a.items) != len(b.items):
            return False
        return all(nodes_equal(x, y) for x, y in zip(a.items, b.items))
    if not isinstance(b, ScalarNode):
        return False
    return _scalars_equal(a.value, b.value)


def values_equal(a: Any, b: Any) -> bool:
    """Structural equality over plain YAML/JSON trees."""
    return nodes_equal(to_node(a), to_node(b))
