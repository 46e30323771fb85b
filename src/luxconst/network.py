# src/luxconst/network.py
from __future__ import annotations

"""Lux network constants.

Built-in network IDs, display names and address HRPs, plus the module-level
lookups backed by DEFAULT_REGISTRY.
"""

from typing import Dict, FrozenSet, Mapping

from luxconst.ids import EMPTY_ID, ID
from luxconst.registry import NetworkInfo, NetworkRegistry, build_registry

# Network IDs
LOCAL_ID: int = 1337
MAINNET_ID: int = 1  # EVM-compatible
TESTNET_ID: int = 2  # EVM-compatible
UNIT_TEST_ID: int = 369

LUX_MAINNET_ID: int = 96369
LUX_TESTNET_ID: int = 96368

QCHAIN_MAINNET_ID: int = 36963
QCHAIN_TESTNET_ID: int = 36962

# Network names
LOCAL_NAME = "local"
MAINNET_NAME = "mainnet"
TESTNET_NAME = "testnet"
UNIT_TEST_NAME = "testing"
QCHAIN_MAINNET_NAME = "qchain-mainnet"
QCHAIN_TESTNET_NAME = "qchain-testnet"

# Human-readable parts (HRP) for addresses
FALLBACK_HRP = "custom"
LOCAL_HRP = "local"
MAINNET_HRP = "lux"
TESTNET_HRP = "test"
UNIT_TEST_HRP = "testing"
QCHAIN_MAINNET_HRP = "qchain"
QCHAIN_TESTNET_HRP = "qtest"

# Names for unregistered IDs are "<prefix><decimal id>".
VALID_NETWORK_PREFIX = "network-"

# Well-known IDs
PRIMARY_NETWORK_ID: ID = EMPTY_ID
PLATFORM_CHAIN_ID: ID = EMPTY_ID
X_CHAIN_ID: ID = ID.from_tag("xchain")
C_CHAIN_ID: ID = ID.from_tag("cchain")

# Memory accounting
POINTER_OVERHEAD: int = 8  # bytes per pointer on 64-bit hosts

_ID_TO_NAME: Dict[int, str] = {
    LOCAL_ID: LOCAL_NAME,
    MAINNET_ID: MAINNET_NAME,
    TESTNET_ID: TESTNET_NAME,
    UNIT_TEST_ID: UNIT_TEST_NAME,
    LUX_MAINNET_ID: MAINNET_NAME,
    LUX_TESTNET_ID: TESTNET_NAME,
    QCHAIN_MAINNET_ID: QCHAIN_MAINNET_NAME,
    QCHAIN_TESTNET_ID: QCHAIN_TESTNET_NAME,
}

# Alias IDs (LUX_MAINNET_ID, LUX_TESTNET_ID) intentionally have no reverse entry.
_NAME_TO_ID: Dict[str, int] = {
    LOCAL_NAME: LOCAL_ID,
    MAINNET_NAME: MAINNET_ID,
    TESTNET_NAME: TESTNET_ID,
    UNIT_TEST_NAME: UNIT_TEST_ID,
    QCHAIN_MAINNET_NAME: QCHAIN_MAINNET_ID,
    QCHAIN_TESTNET_NAME: QCHAIN_TESTNET_ID,
}

_ID_TO_HRP: Dict[int, str] = {
    LOCAL_ID: LOCAL_HRP,
    MAINNET_ID: MAINNET_HRP,
    TESTNET_ID: TESTNET_HRP,
    UNIT_TEST_ID: UNIT_TEST_HRP,
    LUX_MAINNET_ID: MAINNET_HRP,
    LUX_TESTNET_ID: TESTNET_HRP,
    QCHAIN_MAINNET_ID: QCHAIN_MAINNET_HRP,
    QCHAIN_TESTNET_ID: QCHAIN_TESTNET_HRP,
}

_HRP_TO_ID: Dict[str, int] = {
    LOCAL_HRP: LOCAL_ID,
    MAINNET_HRP: MAINNET_ID,
    TESTNET_HRP: TESTNET_ID,
    UNIT_TEST_HRP: UNIT_TEST_ID,
    QCHAIN_MAINNET_HRP: QCHAIN_MAINNET_ID,
    QCHAIN_TESTNET_HRP: QCHAIN_TESTNET_ID,
}

DEFAULT_REGISTRY: NetworkRegistry = build_registry(
    id_to_name=_ID_TO_NAME,
    name_to_id=_NAME_TO_ID,
    id_to_hrp=_ID_TO_HRP,
    hrp_to_id=_HRP_TO_ID,
    # Networks that must run with production-grade settings.
    production_ids={MAINNET_ID, TESTNET_ID, LUX_MAINNET_ID, LUX_TESTNET_ID},
    fallback_prefix=VALID_NETWORK_PREFIX,
    fallback_hrp=FALLBACK_HRP,
)

# Read-only views of the built-in tables.
NETWORK_ID_TO_NETWORK_NAME: Mapping[int, str] = DEFAULT_REGISTRY.id_to_name
NETWORK_NAME_TO_NETWORK_ID: Mapping[str, int] = DEFAULT_REGISTRY.name_to_id
NETWORK_ID_TO_HRP: Mapping[int, str] = DEFAULT_REGISTRY.id_to_hrp
NETWORK_HRP_TO_NETWORK_ID: Mapping[str, int] = DEFAULT_REGISTRY.hrp_to_id
PRODUCTION_NETWORK_IDS: FrozenSet[int] = DEFAULT_REGISTRY.production_ids


def network_name(network_id: int) -> str:
    """Return the name for the given network ID ("network-<id>" if unregistered)."""
    return DEFAULT_REGISTRY.network_name(network_id)


def network_id(name: str) -> int:
    """Return the network ID for the given name; raises UnknownNetworkNameError."""
    return DEFAULT_REGISTRY.network_id(name)


def get_hrp(network_id: int) -> str:
    return DEFAULT_REGISTRY.get_hrp(network_id)


def is_production(network_id: int) -> bool:
    return DEFAULT_REGISTRY.is_production(network_id)


def network_info(network_id: int) -> NetworkInfo:
    return DEFAULT_REGISTRY.network_info(network_id)
