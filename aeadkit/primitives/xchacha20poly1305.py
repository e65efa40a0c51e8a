"""
XChaCha20-Poly1305
==================
Extended-nonce ChaCha20 stream cipher + Poly1305 authentication tag.

Key:   256-bit (32 bytes)
Nonce: 192-bit (24 bytes) -- randomly generated per message
Tag:   128-bit (16 bytes) -- Poly1305 authentication

Bundle format: nonce(24) || ciphertext || tag(16)

With a 96-bit nonce, random nonces start to collide after ~2^32 messages
under one key. A 192-bit nonce pushes that to ~2^80, so drawing a fresh
random nonce for every message is safe at any realistic volume.

Backend: libsodium crypto_aead_xchacha20poly1305_ietf_* through PyNaCl.
libsodium checks the tag before it writes any plaintext.

Dependencies: pynacl >= 1.5
"""

import os
from typing import Optional

from nacl.bindings import (
    crypto_aead_xchacha20poly1305_ietf_decrypt,
    crypto_aead_xchacha20poly1305_ietf_encrypt,
)
from nacl.exceptions import CryptoError

from ..errors import AuthenticationFailure, EncryptionFailure, InvalidKeyMaterial


class XChaCha20Poly1305:
    """XChaCha20-Poly1305 authenticated encryption with random nonces."""

    KEY_SIZE   = 32
    NONCE_SIZE = 24
    TAG_SIZE   = 16

    def __init__(self, key: bytes):
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyMaterial(
                f"XChaCha20-Poly1305 key must be {self.KEY_SIZE} bytes, "
                f"got {len(key)}.")
        self._key = bytes(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{self.KEY_SIZE}-byte key>)"

    def encrypt(self, plaintext: bytes,
                associated_data: Optional[bytes] = None) -> bytes:
        """
        Encrypt and authenticate plaintext.
        Returns: nonce(24) || ciphertext || tag(16)  -- len(plaintext) + 40
        """
        try:
            nonce = os.urandom(self.NONCE_SIZE)
        except (OSError, NotImplementedError) as e:
            raise EncryptionFailure("system random source unavailable") from e
        ct = crypto_aead_xchacha20poly1305_ietf_encrypt(
            bytes(plaintext), bytes(associated_data or b""), nonce, self._key)
        return nonce + ct

    def decrypt(self, ciphertext: bytes,
                associated_data: Optional[bytes] = None) -> bytes:
        """
        Verify and decrypt a bundle produced by encrypt().
        Raises AuthenticationFailure on any tamper, wrong key or wrong aad.
        """
        ciphertext = bytes(ciphertext)
        if len(ciphertext) < self.NONCE_SIZE + self.TAG_SIZE:
            raise AuthenticationFailure()
        nonce = ciphertext[:self.NONCE_SIZE]
        try:
            return crypto_aead_xchacha20poly1305_ietf_decrypt(
                ciphertext[self.NONCE_SIZE:], bytes(associated_data or b""),
                nonce, self._key)
        except CryptoError:
            raise AuthenticationFailure() from None
