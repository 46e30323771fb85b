# src/luxconst/catalog.py
from __future__ import annotations

"""Operator network catalog.

Lets a node register extra networks without code changes. The catalog is a
YAML (.yaml/.yml) or JSON file:

    version: 1
    fallback_hrp: custom        # optional
    networks:
      - id: 12345
        name: devnet-a
        hrp: deva
        resolvable: true        # adds name/HRP -> ID reverse entries
        production: false

Entries are overlaid on a base registry (normally DEFAULT_REGISTRY) and the
result goes through the same validation as the built-in tables.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from luxconst.env import load_dotenv_if_present
from luxconst.errors import RegistryConfigError
from luxconst.log import log_event
from luxconst.network import DEFAULT_REGISTRY
from luxconst.registry import MAX_NETWORK_ID, NetworkRegistry, build_registry

NETWORKS_PATH_ENV = "LUXCONST_NETWORKS_PATH"
CATALOG_VERSION = 1

_LOG = logging.getLogger("luxconst.catalog")


class _StrictModel(BaseModel):
    """Strict model: reject unknown keys."""

    model_config = ConfigDict(extra="forbid")


class NetworkEntry(_StrictModel):
    id: int = Field(..., ge=0, le=MAX_NETWORK_ID, description="uint32 network ID")
    name: str = Field(..., min_length=1, description="Display name")
    hrp: str = Field(..., min_length=1, description="Address human-readable part")
    resolvable: bool = Field(default=False, description="Add reverse name/HRP entries")
    production: bool = Field(default=False, description="Requires production-grade settings")


class NetworkCatalog(_StrictModel):
    version: int = Field(default=CATALOG_VERSION)
    fallback_hrp: Optional[str] = Field(default=None, min_length=1)
    networks: List[NetworkEntry] = Field(default_factory=list)


def _parse_catalog_text(text: str, *, suffix: str) -> object:
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    return json.loads(text)


def load_network_catalog(path: str | Path) -> NetworkCatalog:
    p = Path(path)
    if not p.is_file():
        raise RegistryConfigError(f"network catalog not found: {p}", code="invalid_catalog")

    try:
        raw = _parse_catalog_text(p.read_text(encoding="utf-8"), suffix=p.suffix.lower())
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RegistryConfigError(f"failed to parse network catalog {p}: {e}", code="invalid_catalog") from e

    if not isinstance(raw, dict):
        raise RegistryConfigError("network catalog must be an object", code="invalid_catalog")

    try:
        catalog = NetworkCatalog.model_validate(raw)
    except ValidationError as e:
        raise RegistryConfigError(f"invalid network catalog {p}: {e}", code="invalid_catalog") from e

    if catalog.version != CATALOG_VERSION:
        raise RegistryConfigError(
            f"unsupported network catalog version {catalog.version}; expected {CATALOG_VERSION}",
            code="invalid_catalog",
        )
    return catalog


def extend_registry(base: NetworkRegistry, catalog: NetworkCatalog) -> NetworkRegistry:
    """Overlay catalog networks on `base`. Built-in IDs cannot be redefined."""
    id_to_name = dict(base.id_to_name)
    name_to_id = dict(base.name_to_id)
    id_to_hrp = dict(base.id_to_hrp)
    hrp_to_id = dict(base.hrp_to_id)
    production_ids = set(base.production_ids)

    for entry in catalog.networks:
        if entry.id in id_to_name or entry.id in id_to_hrp:
            raise RegistryConfigError(f"network catalog redefines existing network ID {entry.id}")

        id_to_name[entry.id] = entry.name
        id_to_hrp[entry.id] = entry.hrp

        if entry.resolvable:
            for table, key in ((name_to_id, entry.name.lower()), (hrp_to_id, entry.hrp.lower())):
                if key in table:
                    raise RegistryConfigError(f"network catalog reuses resolvable label {key!r}")
                table[key] = entry.id

        if entry.production:
            production_ids.add(entry.id)

    registry = build_registry(
        id_to_name=id_to_name,
        name_to_id=name_to_id,
        id_to_hrp=id_to_hrp,
        hrp_to_id=hrp_to_id,
        production_ids=production_ids,
        fallback_prefix=base.fallback_prefix,
        fallback_hrp=catalog.fallback_hrp or base.fallback_hrp,
    )

    log_event(
        _LOG,
        "network_registry_extended",
        added=[entry.id for entry in catalog.networks],
        production=sorted(registry.production_ids),
        fallback_hrp=registry.fallback_hrp,
    )
    return registry


def load_registry(*, config_path: Optional[str] = None) -> NetworkRegistry:
    """Build the node's network registry.

    Path resolution: explicit `config_path`, else LUXCONST_NETWORKS_PATH (after
    loading .env). With neither, the built-in registry is returned unchanged.
    """
    load_dotenv_if_present()
    p = config_path or os.environ.get(NETWORKS_PATH_ENV)
    if not p:
        log_event(_LOG, "network_registry_loaded", source="builtin", networks=len(DEFAULT_REGISTRY.id_to_name))
        return DEFAULT_REGISTRY

    registry = extend_registry(DEFAULT_REGISTRY, load_network_catalog(p))
    log_event(_LOG, "network_registry_loaded", source=str(p), networks=len(registry.id_to_name))
    return registry
