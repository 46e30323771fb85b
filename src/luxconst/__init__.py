# src/luxconst/__init__.py
"""
Lux node constants.

  - compression: compression type tags and their JSON string form
  - network: built-in network IDs, names, HRPs and lookups
  - registry: frozen, validated network tables (NetworkRegistry)
  - catalog: operator-supplied networks layered on the built-ins
  - ids: fixed-width 32-byte identifiers
  - errors: error types with stable codes

The compression and network facilities are independent; neither imports the
other.
"""

from __future__ import annotations

__all__ = [
    "compression",
    "network",
    "registry",
    "catalog",
    "ids",
    "errors",
]
