# src/luxconst/registry.py
from __future__ import annotations

"""Network registry: numeric network IDs <-> display names and address HRPs.

The registry is built once and never mutated. Forward tables (ID -> name,
ID -> HRP) may be non-injective (alias IDs share a name); the reverse tables
are curated subsets and are NOT derived from the forward tables.

Unknown IDs still resolve:
  - name: "<fallback_prefix><decimal id>", which network_id() parses back
  - HRP:  the single fallback HRP (lossy, no inverse)
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import AbstractSet, FrozenSet, Mapping

from luxconst.errors import RegistryConfigError, UnknownNetworkIDError, UnknownNetworkNameError

MAX_NETWORK_ID: int = 2**32 - 1


@dataclass(frozen=True, slots=True)
class NetworkInfo:
    network_id: int
    name: str
    hrp: str
    production: bool


@dataclass(frozen=True)
class NetworkRegistry:
    id_to_name: Mapping[int, str]
    name_to_id: Mapping[str, int]
    id_to_hrp: Mapping[int, str]
    hrp_to_id: Mapping[str, int]
    production_ids: FrozenSet[int]
    fallback_prefix: str
    fallback_hrp: str

    def network_name(self, network_id: int) -> str:
        name = self.id_to_name.get(network_id)
        if name is not None:
            return name
        return f"{self.fallback_prefix}{network_id}"

    def network_id(self, name: str) -> int:
        """Resolve a network name (case-insensitive) to its ID.

        Curated names win. Otherwise "<prefix><digits>" is accepted for any
        32-bit value, including IDs that also have a curated name.
        """
        key = name.lower()
        network_id = self.name_to_id.get(key)
        if network_id is not None:
            return network_id

        if key.startswith(self.fallback_prefix):
            parsed = _parse_uint32(key[len(self.fallback_prefix):])
            if parsed is not None:
                return parsed

        raise UnknownNetworkNameError(f"unknown network name: {name!r}")

    def get_hrp(self, network_id: int) -> str:
        return self.id_to_hrp.get(network_id, self.fallback_hrp)

    def is_production(self, network_id: int) -> bool:
        return network_id in self.production_ids

    def is_known(self, network_id: int) -> bool:
        return network_id in self.id_to_name

    def network_info(self, network_id: int) -> NetworkInfo:
        name = self.id_to_name.get(network_id)
        if name is None:
            raise UnknownNetworkIDError(f"unknown network ID: {network_id}")
        return NetworkInfo(
            network_id=network_id,
            name=name,
            hrp=self.get_hrp(network_id),
            production=self.is_production(network_id),
        )


def _parse_uint32(s: str) -> int | None:
    # Plain ASCII decimal only: int() would also take signs, whitespace,
    # underscores and non-ASCII digits.
    if not s or not s.isascii() or not s.isdigit():
        return None
    v = int(s, 10)
    if v > MAX_NETWORK_ID:
        return None
    return v


def _check_id(network_id: object, *, table: str) -> int:
    if isinstance(network_id, bool) or not isinstance(network_id, int):
        raise RegistryConfigError(f"{table}: network ID must be int; got {type(network_id).__name__}")
    if network_id < 0 or network_id > MAX_NETWORK_ID:
        raise RegistryConfigError(f"{table}: network ID out of uint32 range: {network_id}")
    return network_id


def _check_label(label: object, *, table: str) -> str:
    if not isinstance(label, str) or not label:
        raise RegistryConfigError(f"{table}: entries must be non-empty strings; got {label!r}")
    return label


def _check_reverse(
    reverse: Mapping[str, int], forward: Mapping[int, str], *, table: str
) -> None:
    for label, network_id in reverse.items():
        _check_label(label, table=table)
        _check_id(network_id, table=table)
        if label != label.lower():
            raise RegistryConfigError(f"{table}: key {label!r} must be lowercase to be resolvable")
        if (forward.get(network_id) or "").lower() != label:
            raise RegistryConfigError(
                f"{table}: {label!r} -> {network_id} does not match forward entry {forward.get(network_id)!r}"
            )


def build_registry(
    *,
    id_to_name: Mapping[int, str],
    name_to_id: Mapping[str, int],
    id_to_hrp: Mapping[int, str],
    hrp_to_id: Mapping[str, int],
    production_ids: AbstractSet[int],
    fallback_prefix: str,
    fallback_hrp: str,
) -> NetworkRegistry:
    """Validate the tables and freeze them into a NetworkRegistry.

    Fails fast with RegistryConfigError on:
      - IDs outside the uint32 range
      - a named ID without an HRP
      - a production ID without a curated name
      - reverse entries that are not lowercase or do not point back at a
        forward entry with the same (case-folded) label
      - curated names that collide with the fallback name syntax
      - an empty fallback prefix or fallback HRP, or a mixed-case prefix
    """
    _check_label(fallback_prefix, table="fallback_prefix")
    _check_label(fallback_hrp, table="fallback_hrp")
    if fallback_prefix != fallback_prefix.lower():
        raise RegistryConfigError(f"fallback_prefix: {fallback_prefix!r} must be lowercase to be resolvable")

    for network_id, name in id_to_name.items():
        _check_id(network_id, table="id_to_name")
        _check_label(name, table="id_to_name")
        if name.lower().startswith(fallback_prefix):
            raise RegistryConfigError(
                f"id_to_name: name {name!r} collides with fallback prefix {fallback_prefix!r}"
            )
        if network_id not in id_to_hrp:
            raise RegistryConfigError(f"id_to_hrp: named network {network_id} ({name!r}) has no HRP")

    for network_id, hrp in id_to_hrp.items():
        _check_id(network_id, table="id_to_hrp")
        _check_label(hrp, table="id_to_hrp")

    _check_reverse(name_to_id, id_to_name, table="name_to_id")
    _check_reverse(hrp_to_id, id_to_hrp, table="hrp_to_id")

    for network_id in production_ids:
        _check_id(network_id, table="production_ids")
        if network_id not in id_to_name:
            raise RegistryConfigError(f"production_ids: network {network_id} has no curated name")

    return NetworkRegistry(
        id_to_name=MappingProxyType(dict(id_to_name)),
        name_to_id=MappingProxyType(dict(name_to_id)),
        id_to_hrp=MappingProxyType(dict(id_to_hrp)),
        hrp_to_id=MappingProxyType(dict(hrp_to_id)),
        production_ids=frozenset(production_ids),
        fallback_prefix=fallback_prefix,
        fallback_hrp=fallback_hrp,
    )
