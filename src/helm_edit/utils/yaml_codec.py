"""YAML (de)serialization of values documents."""

from __future__ import annotations

from typing import Any

import yaml

from helm_edit.errors import CodecError

# Prefer the C-accelerated implementations when available.
_YamlLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)
_YamlDumper = getattr(yaml, "CSafeDumper", yaml.SafeDumper)


def marshal(doc: Any) -> str:
    """Serialize a values document the same way every time.

    Keys are sorted and block style is used, so an untouched document
    always round-trips to identical text.
    """
    if doc is None or doc == {}:
        return "{}\n"
    try:
        return yaml.dump(
            doc,
            Dumper=_YamlDumper,
            default_flow_style=False,
            sort_keys=True,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        raise CodecError(f"cannot serialize values: {e}") from e


def _string_keys(node: Any) -> Any:
    if isinstance(node, dict):
        return {str(k): _string_keys(v) for k, v in node.items()}
    if isinstance(node, list):
        return [_string_keys(v) for v in node]
    return node


def unmarshal(text: str | bytes, source: str = "<string>") -> dict:
    """Parse a values document; an empty document yields an empty map.

    Map keys are turned into strings at every level, as Helm stores values
    as JSON objects.
    """
    try:
        doc = yaml.load(text, Loader=_YamlLoader)
    except yaml.YAMLError as e:
        raise CodecError(f"error parsing {source}: {e}") from e
    if doc is None:
        return {}
    if not isinstance(doc, dict):
        raise CodecError(
            f"error parsing {source}: top level must be a map, got {type(doc).__name__}"
        )
    return _string_keys(doc)
