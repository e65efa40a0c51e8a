"""
AES-GCM primitive
=================
Second AEAD behind the key-manager interface. Built by AesGcmKeyManager
from a validated AesGcmKey; accepts AES-128 and AES-256 keys only (16 or
32 bytes). A 24-byte key, although valid AES, raises InvalidKeyMaterial.

Each call draws a random 12-byte nonce and returns

    nonce(12) || ciphertext || tag(16)        -- len(plaintext) + 28

Short input and tag mismatch both raise the generic AuthenticationFailure;
`cryptography`'s InvalidTag is not chained. A 96-bit random nonce bounds
each key to about 2^32 messages, which XChaCha20Poly1305 does not.
"""

import os
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..errors import AuthenticationFailure, EncryptionFailure, InvalidKeyMaterial


class AesGcm:
    """AES-GCM authenticated encryption with random nonces."""

    KEY_SIZES  = (16, 32)
    NONCE_SIZE = 12   # 96-bit nonce (GCM standard)
    TAG_SIZE   = 16

    def __init__(self, key: bytes):
        if len(key) not in self.KEY_SIZES:
            raise InvalidKeyMaterial(
                f"AES-GCM key must be 16 or 32 bytes, got {len(key)}.")
        self._aesgcm = AESGCM(bytes(key))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<key>)"

    def encrypt(self, plaintext: bytes,
                associated_data: Optional[bytes] = None) -> bytes:
        """
        Encrypt and authenticate.
        Returns: nonce || ciphertext+tag
        """
        try:
            nonce = os.urandom(self.NONCE_SIZE)
        except (OSError, NotImplementedError) as e:
            raise EncryptionFailure("system random source unavailable") from e
        return nonce + self._aesgcm.encrypt(nonce, bytes(plaintext),
                                            associated_data or b"")

    def decrypt(self, ciphertext: bytes,
                associated_data: Optional[bytes] = None) -> bytes:
        """
        Decrypt and verify authentication tag.
        Raises AuthenticationFailure if tampered.
        """
        if len(ciphertext) < self.NONCE_SIZE + self.TAG_SIZE:
            raise AuthenticationFailure()
        nonce = bytes(ciphertext[:self.NONCE_SIZE])
        ct    = bytes(ciphertext[self.NONCE_SIZE:])
        try:
            return self._aesgcm.decrypt(nonce, ct, associated_data or b"")
        except InvalidTag:
            raise AuthenticationFailure() from None
