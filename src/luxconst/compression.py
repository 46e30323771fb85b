# src/luxconst/compression.py
from __future__ import annotations

"""Compression type tags.

Values are 1-based so a zero byte is recognizably unset rather than silently
meaning "none".
"""

from enum import IntEnum

from luxconst.errors import UnknownCompressionTypeError

UNKNOWN = "unknown"


class CompressionType(IntEnum):
    NONE = 1
    ZSTD = 2

    def __str__(self) -> str:
        return compression_type_string(self)

    def to_json(self) -> bytes:
        return marshal_json(self)


_NAMES = {
    CompressionType.NONE: "none",
    CompressionType.ZSTD: "zstd",
}

_BY_NAME = {name: ct for ct, name in _NAMES.items()}


def compression_type_string(value: int) -> str:
    """Canonical name for a compression tag; "unknown" for anything unassigned."""
    if isinstance(value, bool) or not isinstance(value, int):
        return UNKNOWN
    try:
        return _NAMES[CompressionType(value)]
    except ValueError:
        return UNKNOWN


def compression_type_from_string(s: str) -> CompressionType:
    ct = _BY_NAME.get(s) if isinstance(s, str) else None
    if ct is None:
        raise UnknownCompressionTypeError(f"unknown compression type: {s!r}")
    return ct


def marshal_json(value: int) -> bytes:
    """Encode a compression tag as a JSON string literal, e.g. b'"zstd"'."""
    return b'"' + compression_type_string(value).encode("ascii") + b'"'
