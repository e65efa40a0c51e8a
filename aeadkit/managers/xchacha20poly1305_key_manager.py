"""
XChaCha20-Poly1305 key manager
==============================
Generates, validates and (de)serializes XChaCha20Poly1305Key structures
and builds XChaCha20Poly1305 primitives from them.

A key is valid only if:
    version   == KEY_VERSION (0)
    key_value is exactly KEY_SIZE (32) bytes

The key format carries no parameters, so every ``new_key_*`` call ignores
its argument, including None.

The manager holds no mutable state; one instance can be shared across
threads.
"""

import logging
import os
from typing import Callable, Optional

from ..errors import InvalidKeySize, InvalidKeyVersion
from ..keys import (
    KeyData,
    KeyMaterialType,
    XChaCha20Poly1305Key,
    XChaCha20Poly1305KeyFormat,
)
from ..primitives.xchacha20poly1305 import XChaCha20Poly1305
from .. import wire

logger = logging.getLogger(__name__)

TYPE_URL    = "type.googleapis.com/google.crypto.tink.XChaCha20Poly1305Key"
KEY_VERSION = 0
KEY_SIZE    = XChaCha20Poly1305.KEY_SIZE


class XChaCha20Poly1305KeyManager:
    """Key manager for XChaCha20Poly1305Key."""

    def __init__(
        self,
        serialize: Callable[[XChaCha20Poly1305Key], bytes]
            = wire.serialize_xchacha20poly1305_key,
        deserialize: Callable[[bytes], XChaCha20Poly1305Key]
            = wire.deserialize_xchacha20poly1305_key,
    ):
        self._serialize   = serialize
        self._deserialize = deserialize

    def generate_key(self) -> XChaCha20Poly1305Key:
        key = XChaCha20Poly1305Key(version=KEY_VERSION,
                                   key_value=os.urandom(KEY_SIZE))
        logger.debug("Generated %s (version %d)", TYPE_URL, key.version)
        return key

    def validate(self, key: XChaCha20Poly1305Key) -> None:
        if key.version != KEY_VERSION:
            raise InvalidKeyVersion(
                f"XChaCha20Poly1305Key version {key.version} unsupported; "
                f"expected {KEY_VERSION}.")
        if len(key.key_value) != KEY_SIZE:
            raise InvalidKeySize(
                f"XChaCha20Poly1305Key must be {KEY_SIZE} bytes, "
                f"got {len(key.key_value)}.")

    def primitive_from_key(self, key: XChaCha20Poly1305Key) -> XChaCha20Poly1305:
        self.validate(key)
        primitive = XChaCha20Poly1305(key.key_value)
        logger.debug("Built XChaCha20Poly1305 primitive (version %d)", key.version)
        return primitive

    def primitive_from_serialized_key(self, serialized_key: bytes) -> XChaCha20Poly1305:
        return self.primitive_from_key(self._deserialize(serialized_key))

    def new_key_from_format(
            self, key_format: Optional[XChaCha20Poly1305KeyFormat] = None
    ) -> XChaCha20Poly1305Key:
        return self.generate_key()

    def new_key_from_serialized_format(
            self, serialized_format: Optional[bytes] = None
    ) -> XChaCha20Poly1305Key:
        return self.generate_key()

    def new_key_data(self, serialized_format: Optional[bytes] = None) -> KeyData:
        """Mint a fresh key wrapped in a SYMMETRIC KeyData envelope."""
        return KeyData(type_url=TYPE_URL,
                       value=self._serialize(self.generate_key()),
                       key_material_type=KeyMaterialType.SYMMETRIC)

    def supports_type(self, type_url: str) -> bool:
        return type_url == TYPE_URL

    def key_type(self) -> str:
        return TYPE_URL
