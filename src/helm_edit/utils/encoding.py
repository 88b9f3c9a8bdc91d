"""Base64 / gzip helpers for the release payload Helm keeps in storage."""

from __future__ import annotations

import base64
import gzip
import json

_GZIP_MAGIC = b"\x1f\x8b"


def _inflate(blob: bytes) -> dict:
    return json.loads(gzip.decompress(blob).decode("utf-8"))


def decode_release_secret(data: bytes) -> dict:
    """Decode the ``release`` key of a Helm Secret.

    The kubernetes client returns Secret data still base64-encoded, so the
    usual payload is base64(base64(gzip(json))) and two layers are peeled
    off. A payload that already shows the gzip magic number after one
    layer is accepted as well.
    """
    blob = base64.b64decode(data)
    if blob[:2] != _GZIP_MAGIC:
        blob = base64.b64decode(blob)
    return _inflate(blob)


def decode_release_configmap(data: str) -> dict:
    """Decode the ``release`` key of a Helm ConfigMap: base64(gzip(json))."""
    blob = base64.b64decode(data.encode("ascii"))
    if blob[:2] != _GZIP_MAGIC:
        blob = base64.b64decode(blob)
    return _inflate(blob)


def encode_release(payload: dict) -> str:
    """Inverse of the decoders: base64(gzip(json))."""
    blob = gzip.compress(json.dumps(payload).encode("utf-8"))
    return base64.b64encode(blob).decode("ascii")
