from __future__ import annotations

from typing import Any, Dict

import pytest

from luxconst.errors import RegistryConfigError, UnknownNetworkNameError
from luxconst.registry import NetworkRegistry, build_registry


def _tables(**overrides: Any) -> Dict[str, Any]:
    t: Dict[str, Any] = {
        "id_to_name": {10: "alpha", 11: "alpha", 20: "beta"},
        "name_to_id": {"alpha": 10, "beta": 20},
        "id_to_hrp": {10: "al", 11: "al", 20: "be"},
        "hrp_to_id": {"al": 10},
        "production_ids": {10, 11},
        "fallback_prefix": "net-",
        "fallback_hrp": "unk",
    }
    t.update(overrides)
    return t


def _reg(**overrides: Any) -> NetworkRegistry:
    return build_registry(**_tables(**overrides))


def test_custom_prefix_and_hrp() -> None:
    reg = _reg()
    assert reg.network_name(20) == "beta"
    assert reg.network_name(99) == "net-99"
    assert reg.network_id("net-99") == 99
    assert reg.network_id("BETA") == 20
    assert reg.network_id("alpha") == 10
    assert reg.get_hrp(11) == "al"
    assert reg.get_hrp(99) == "unk"
    assert reg.is_known(11)
    assert not reg.is_known(99)

    with pytest.raises(UnknownNetworkNameError):
        reg.network_id("network-99")


def test_tables_are_copied() -> None:
    src = {10: "alpha", 11: "alpha", 20: "beta"}
    reg = _reg(id_to_name=src)
    src[30] = "gamma"
    assert 30 not in reg.id_to_name
    assert reg.network_name(30) == "net-30"


def test_registry_is_frozen() -> None:
    reg = _reg()
    with pytest.raises(AttributeError):
        reg.fallback_hrp = "x"  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides,needle",
    [
        ({"id_to_name": {10: "alpha", 11: "alpha", 20: "beta", 30: "gamma"}}, "has no HRP"),
        ({"production_ids": {10, 99}}, "no curated name"),
        ({"name_to_id": {"Alpha": 10}, "id_to_name": {10: "Alpha", 11: "alpha", 20: "beta"}}, "lowercase"),
        ({"name_to_id": {"alpha": 20}}, "does not match"),
        ({"hrp_to_id": {"be": 10}}, "does not match"),
        ({"id_to_name": {10: "alpha", 11: "alpha", 20: "net-20"}}, "fallback prefix"),
        ({"id_to_name": {-1: "alpha"}, "id_to_hrp": {-1: "al"}, "name_to_id": {}, "hrp_to_id": {}, "production_ids": set()}, "uint32"),
        ({"id_to_hrp": {10: "al", 11: "al", 20: "be", 2**32: "big"}}, "uint32"),
        ({"id_to_name": {True: "alpha"}, "id_to_hrp": {True: "al"}, "name_to_id": {}, "hrp_to_id": {}, "production_ids": set()}, "must be int"),
        ({"id_to_hrp": {10: "", 11: "al", 20: "be"}, "hrp_to_id": {}}, "non-empty"),
        ({"fallback_prefix": ""}, "non-empty"),
        ({"fallback_hrp": ""}, "non-empty"),
        ({"fallback_prefix": "Net-"}, "lowercase"),
    ],
)
def test_invalid_tables_rejected(overrides: Dict[str, Any], needle: str) -> None:
    with pytest.raises(RegistryConfigError) as ei:
        _reg(**overrides)
    assert ei.value.code == "invalid_registry"
    assert needle in str(ei.value)
