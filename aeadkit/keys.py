"""
Key structures
==============
Immutable key, key-format and KeyData containers shared by every manager.
Secret bytes are excluded from repr() so keys never leak into logs or
tracebacks.
"""

from dataclasses import dataclass, field
from enum import IntEnum


class KeyMaterialType(IntEnum):
    UNKNOWN_KEYMATERIAL = 0
    SYMMETRIC           = 1
    ASYMMETRIC_PRIVATE  = 2
    ASYMMETRIC_PUBLIC   = 3
    REMOTE              = 4


@dataclass(frozen=True)
class XChaCha20Poly1305Key:
    version:   int
    key_value: bytes = field(repr=False)


@dataclass(frozen=True)
class XChaCha20Poly1305KeyFormat:
    """Carries no parameters: key size and cipher are fixed by the type."""


@dataclass(frozen=True)
class AesGcmKey:
    version:   int
    key_value: bytes = field(repr=False)


@dataclass(frozen=True)
class AesGcmKeyFormat:
    key_size: int
    version:  int = 0


@dataclass(frozen=True)
class KeyData:
    """Type-tagged, serialized key handed to algorithm-agnostic code."""

    type_url:          str
    value:             bytes = field(repr=False)
    key_material_type: KeyMaterialType
