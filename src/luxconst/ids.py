# src/luxconst/ids.py
from __future__ import annotations

"""Fixed-width 32-byte identifiers.

Chain and network identifiers are compared by raw bytes across the node, so
the layout is part of the contract: short ASCII tags are left-aligned and the
remainder is zero-filled.
"""

from dataclasses import dataclass

ID_LEN: int = 32


@dataclass(frozen=True, slots=True)
class ID:
    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray)):
            raise ValueError(f"ID must be bytes; got {type(self.raw).__name__}")
        if len(self.raw) != ID_LEN:
            raise ValueError(f"ID must be exactly {ID_LEN} bytes; got {len(self.raw)}")
        object.__setattr__(self, "raw", bytes(self.raw))

    @classmethod
    def from_tag(cls, tag: str) -> "ID":
        data = tag.encode("ascii")[:ID_LEN]
        return cls(data.ljust(ID_LEN, b"\x00"))

    def __bytes__(self) -> bytes:
        return self.raw

    def hex(self) -> str:
        return self.raw.hex()

    def is_empty(self) -> bool:
        return self.raw == EMPTY_ID.raw

    def __str__(self) -> str:
        return self.raw.hex()


EMPTY_ID = ID(bytes(ID_LEN))
