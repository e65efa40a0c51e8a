"""
aeadkit
=======
Typed key managers for authenticated encryption with associated data.

Primitives:
    XChaCha20Poly1305  -- 192-bit random nonce, Poly1305 tag (default choice)
    AesGcm             -- AES-128/256-GCM, 96-bit random nonce

Key managers generate, validate and (de)serialize keys, and build a
primitive only from a key that passed validation:

    km  = XChaCha20Poly1305KeyManager()
    aead = km.primitive_from_key(km.generate_key())
    ct  = aead.encrypt(b"message", b"context")
    pt  = aead.decrypt(ct, b"context")

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors   import (
    AeadKitError,
    AuthenticationFailure,
    DeserializationFailure,
    EncryptionFailure,
    InvalidKeyFormat,
    InvalidKeyMaterial,
    InvalidKeySize,
    InvalidKeyVersion,
)
from .keys     import (
    AesGcmKey,
    AesGcmKeyFormat,
    KeyData,
    KeyMaterialType,
    XChaCha20Poly1305Key,
    XChaCha20Poly1305KeyFormat,
)
from .primitives import AesGcm, XChaCha20Poly1305
from .managers   import AesGcmKeyManager, KeyManager, XChaCha20Poly1305KeyManager

__all__ = [
    "AeadKitError",
    "AuthenticationFailure",
    "DeserializationFailure",
    "EncryptionFailure",
    "InvalidKeyFormat",
    "InvalidKeyMaterial",
    "InvalidKeySize",
    "InvalidKeyVersion",
    "AesGcmKey",
    "AesGcmKeyFormat",
    "KeyData",
    "KeyMaterialType",
    "XChaCha20Poly1305Key",
    "XChaCha20Poly1305KeyFormat",
    "AesGcm",
    "XChaCha20Poly1305",
    "AesGcmKeyManager",
    "KeyManager",
    "XChaCha20Poly1305KeyManager",
]
