"""
AES-GCM key manager
===================
Same interface as the XChaCha20-Poly1305 manager, for AesGcmKey.

Unlike XChaCha20-Poly1305, the AES-GCM key format carries a parameter
(key_size: 16 or 32), so a format is required: ``new_key_from_format(None)``
raises InvalidKeyFormat instead of picking a default.
"""

import logging
import os
from typing import Callable, Optional

from ..errors import InvalidKeyFormat, InvalidKeySize, InvalidKeyVersion
from ..keys import AesGcmKey, AesGcmKeyFormat, KeyData, KeyMaterialType
from ..primitives.aes_gcm import AesGcm
from .. import wire

logger = logging.getLogger(__name__)

TYPE_URL    = "type.googleapis.com/google.crypto.tink.AesGcmKey"
KEY_VERSION = 0
KEY_SIZES   = AesGcm.KEY_SIZES


class AesGcmKeyManager:
    """Key manager for AesGcmKey."""

    def __init__(
        self,
        serialize: Callable[[AesGcmKey], bytes] = wire.serialize_aes_gcm_key,
        deserialize: Callable[[bytes], AesGcmKey] = wire.deserialize_aes_gcm_key,
        deserialize_format: Callable[[bytes], AesGcmKeyFormat]
            = wire.deserialize_aes_gcm_key_format,
    ):
        self._serialize          = serialize
        self._deserialize        = deserialize
        self._deserialize_format = deserialize_format

    def generate_key(self, key_size: int = 32) -> AesGcmKey:
        if key_size not in KEY_SIZES:
            raise InvalidKeySize(f"AES-GCM key size {key_size} unsupported.")
        key = AesGcmKey(version=KEY_VERSION, key_value=os.urandom(key_size))
        logger.debug("Generated %s (%d-bit, version %d)",
                     TYPE_URL, key_size * 8, key.version)
        return key

    def validate(self, key: AesGcmKey) -> None:
        if key.version != KEY_VERSION:
            raise InvalidKeyVersion(
                f"AesGcmKey version {key.version} unsupported; "
                f"expected {KEY_VERSION}.")
        if len(key.key_value) not in KEY_SIZES:
            raise InvalidKeySize(
                f"AesGcmKey must be 16 or 32 bytes, got {len(key.key_value)}.")

    def validate_format(self, key_format: Optional[AesGcmKeyFormat]) -> None:
        if key_format is None:
            raise InvalidKeyFormat("AesGcmKeyFormat is required.")
        if key_format.version != KEY_VERSION:
            raise InvalidKeyFormat(
                f"AesGcmKeyFormat version {key_format.version} unsupported.")
        if key_format.key_size not in KEY_SIZES:
            raise InvalidKeyFormat(
                f"AesGcmKeyFormat key_size {key_format.key_size} unsupported.")

    def primitive_from_key(self, key: AesGcmKey) -> AesGcm:
        self.validate(key)
        primitive = AesGcm(key.key_value)
        logger.debug("Built AesGcm primitive (%d-bit)", len(key.key_value) * 8)
        return primitive

    def primitive_from_serialized_key(self, serialized_key: bytes) -> AesGcm:
        return self.primitive_from_key(self._deserialize(serialized_key))

    def new_key_from_format(
            self, key_format: Optional[AesGcmKeyFormat] = None) -> AesGcmKey:
        self.validate_format(key_format)
        return self.generate_key(key_format.key_size)

    def new_key_from_serialized_format(
            self, serialized_format: Optional[bytes] = None) -> AesGcmKey:
        if not serialized_format:
            raise InvalidKeyFormat("serialized AesGcmKeyFormat is required.")
        return self.new_key_from_format(self._deserialize_format(serialized_format))

    def new_key_data(self, serialized_format: Optional[bytes] = None) -> KeyData:
        key = self.new_key_from_serialized_format(serialized_format)
        return KeyData(type_url=TYPE_URL,
                       value=self._serialize(key),
                       key_material_type=KeyMaterialType.SYMMETRIC)

    def supports_type(self, type_url: str) -> bool:
        return type_url == TYPE_URL

    def key_type(self) -> str:
        return TYPE_URL
