# src/luxconst/errors.py
from __future__ import annotations


class LuxConstError(RuntimeError):
    """Base error for constant lookups and registry construction.

    `code` is stable and safe to branch on; the message is for humans only.
    """

    code = "luxconst_error"

    def __init__(self, msg: str, *, code: str | None = None) -> None:
        super().__init__(msg)
        if code is not None:
            self.code = code


class UnknownCompressionTypeError(LuxConstError):
    code = "unknown_compression_type"


class UnknownNetworkNameError(LuxConstError):
    code = "unknown_network_name"


class UnknownNetworkIDError(LuxConstError):
    code = "unknown_network_id"


class RegistryConfigError(LuxConstError):
    code = "invalid_registry"
