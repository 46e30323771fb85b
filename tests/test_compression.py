from __future__ import annotations

import pytest

from luxconst.compression import (
    CompressionType,
    compression_type_from_string,
    compression_type_string,
    marshal_json,
)
from luxconst.errors import LuxConstError, UnknownCompressionTypeError


def test_zero_is_not_a_member() -> None:
    # 0 is reserved for "unset"; it must not silently mean NONE.
    assert CompressionType.NONE == 1
    assert CompressionType.ZSTD == 2
    with pytest.raises(ValueError):
        CompressionType(0)


def test_to_string_is_total_over_bytes() -> None:
    for v in range(256):
        s = compression_type_string(v)
        assert s
        if v == 1:
            assert s == "none"
        elif v == 2:
            assert s == "zstd"
        else:
            assert s == "unknown"


def test_to_string_rejects_non_int_values() -> None:
    assert compression_type_string(-1) == "unknown"
    assert compression_type_string(2**40) == "unknown"
    assert compression_type_string(True) == "unknown"
    assert compression_type_string("1") == "unknown"  # type: ignore[arg-type]


def test_str_matches_canonical_name() -> None:
    assert str(CompressionType.NONE) == "none"
    assert str(CompressionType.ZSTD) == "zstd"


def test_from_string_inverts_to_string() -> None:
    for ct in CompressionType:
        assert compression_type_from_string(compression_type_string(ct)) is ct


@pytest.mark.parametrize("s", ["unknown", "NONE", "Zstd", "", " zstd", "gzip"])
def test_from_string_rejects_everything_else(s: str) -> None:
    with pytest.raises(UnknownCompressionTypeError) as ei:
        compression_type_from_string(s)
    assert ei.value.code == "unknown_compression_type"
    assert isinstance(ei.value, LuxConstError)


def test_marshal_json_is_quoted_name() -> None:
    assert marshal_json(CompressionType.NONE) == b'"none"'
    assert marshal_json(CompressionType.ZSTD) == b'"zstd"'
    assert CompressionType.ZSTD.to_json() == b'"zstd"'
    assert marshal_json(0) == b'"unknown"'
