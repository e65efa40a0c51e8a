"""
aeadkit — AEAD primitive tests
==============================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from concurrent.futures import ThreadPoolExecutor

import pytest
from nacl.bindings import (
    crypto_aead_xchacha20poly1305_ietf_decrypt,
    crypto_aead_xchacha20poly1305_ietf_encrypt,
)

from aeadkit.errors import (
    AuthenticationFailure,
    EncryptionFailure,
    InvalidKeyMaterial,
)
from aeadkit.primitives import xchacha20poly1305 as xchacha_module
from aeadkit.primitives.aes_gcm import AesGcm
from aeadkit.primitives.xchacha20poly1305 import XChaCha20Poly1305

MSG = b"Attack at dawn - authenticated with a 192-bit nonce."
AAD = b"aeadkit-test"


# ── Construction ─────────────────────────────────────────────────────────────
@pytest.mark.parametrize("size", [0, 16, 17, 25, 31, 33, 64])
def test_rejects_wrong_key_length(size):
    with pytest.raises(InvalidKeyMaterial):
        XChaCha20Poly1305(os.urandom(size))

def test_repr_hides_key():
    key = bytes(range(32))
    assert key.hex() not in repr(XChaCha20Poly1305(key))

# ── Round trip ───────────────────────────────────────────────────────────────
@pytest.mark.parametrize("size", [0, 1, 15, 16, 17, 63, 64, 65, 1000])
def test_roundtrip_sizes(size):
    x  = XChaCha20Poly1305(os.urandom(32))
    pt = os.urandom(size)
    ct = x.encrypt(pt, AAD)
    assert len(ct) == size + 40
    assert x.decrypt(ct, AAD) == pt

def test_roundtrip_without_aad():
    x  = XChaCha20Poly1305(os.urandom(32))
    ct = x.encrypt(MSG)
    assert x.decrypt(ct) == MSG
    assert x.decrypt(ct, b"") == MSG

def test_ciphertext_hides_plaintext():
    x  = XChaCha20Poly1305(os.urandom(32))
    ct = x.encrypt(MSG, AAD)
    assert MSG not in ct

def test_large_payload():
    x   = XChaCha20Poly1305(os.urandom(32))
    big = b"X" * 100_000
    assert x.decrypt(x.encrypt(big, AAD), AAD) == big

# ── Interoperability with libsodium ──────────────────────────────────────────
def test_output_opens_with_libsodium():
    key = os.urandom(32)
    ct  = XChaCha20Poly1305(key).encrypt(MSG, AAD)
    assert crypto_aead_xchacha20poly1305_ietf_decrypt(ct[24:], AAD, ct[:24], key) == MSG

def test_opens_libsodium_output():
    key    = os.urandom(32)
    nonce  = os.urandom(24)
    bundle = nonce + crypto_aead_xchacha20poly1305_ietf_encrypt(MSG, AAD, nonce, key)
    assert XChaCha20Poly1305(key).decrypt(bundle, AAD) == MSG

def test_ietf_draft_inputs_interoperate():
    # draft-irtf-cfrg-xchacha, appendix A.3.1 key / nonce / aad / plaintext
    key   = bytes(range(0x80, 0xa0))
    nonce = bytes(range(0x40, 0x58))
    aad   = bytes.fromhex("50515253c0c1c2c3c4c5c6c7")
    pt    = (b"Ladies and Gentlemen of the class of '99: If I could offer you "
             b"only one tip for the future, sunscreen would be it.")
    bundle = nonce + crypto_aead_xchacha20poly1305_ietf_encrypt(pt, aad, nonce, key)
    assert len(bundle) == len(pt) + 40
    assert XChaCha20Poly1305(key).decrypt(bundle, aad) == pt
    ct = XChaCha20Poly1305(key).encrypt(pt, aad)
    assert crypto_aead_xchacha20poly1305_ietf_decrypt(ct[24:], aad, ct[:24], key) == pt

# ── Tamper detection ─────────────────────────────────────────────────────────
def test_every_bit_flip_in_ciphertext_and_tag_detected():
    x  = XChaCha20Poly1305(os.urandom(32))
    ct = x.encrypt(b"8 bytes!", AAD)
    for i in range(24, len(ct)):
        for bit in range(8):
            tampered = bytearray(ct)
            tampered[i] ^= 1 << bit
            with pytest.raises(AuthenticationFailure):
                x.decrypt(bytes(tampered), AAD)

def test_nonce_tamper_detected():
    x  = XChaCha20Poly1305(os.urandom(32))
    ct = bytearray(x.encrypt(MSG, AAD))
    ct[3] ^= 0x01
    with pytest.raises(AuthenticationFailure):
        x.decrypt(bytes(ct), AAD)

def test_wrong_aad_detected():
    x  = XChaCha20Poly1305(os.urandom(32))
    ct = x.encrypt(MSG, AAD)
    with pytest.raises(AuthenticationFailure):
        x.decrypt(ct, b"other-context")
    with pytest.raises(AuthenticationFailure):
        x.decrypt(ct)

def test_wrong_key_detected():
    ct = XChaCha20Poly1305(os.urandom(32)).encrypt(MSG, AAD)
    with pytest.raises(AuthenticationFailure):
        XChaCha20Poly1305(os.urandom(32)).decrypt(ct, AAD)

@pytest.mark.parametrize("size", [0, 1, 24, 39])
def test_short_input_rejected_generically(size):
    x = XChaCha20Poly1305(os.urandom(32))
    with pytest.raises(AuthenticationFailure) as short:
        x.decrypt(os.urandom(size), AAD)
    ct = bytearray(x.encrypt(MSG, AAD))
    ct[-1] ^= 0x01
    with pytest.raises(AuthenticationFailure) as mismatch:
        x.decrypt(bytes(ct), AAD)
    assert str(short.value) == str(mismatch.value)

def test_backend_error_not_exposed():
    x  = XChaCha20Poly1305(os.urandom(32))
    ct = bytearray(x.encrypt(MSG, AAD))
    ct[30] ^= 0xFF
    with pytest.raises(AuthenticationFailure) as failure:
        x.decrypt(bytes(ct), AAD)
    assert failure.value.__cause__ is None
    assert failure.value.__suppress_context__ is True

# ── Nonces ───────────────────────────────────────────────────────────────────
def test_nonces_never_repeat():
    x = XChaCha20Poly1305(os.urandom(32))
    nonces = {x.encrypt(b"", AAD)[:24] for _ in range(10_000)}
    assert len(nonces) == 10_000

def test_same_plaintext_encrypts_differently():
    x = XChaCha20Poly1305(os.urandom(32))
    assert x.encrypt(MSG, AAD) != x.encrypt(MSG, AAD)

def test_rng_failure_raises_encryption_failure(monkeypatch):
    def broken(n):
        raise OSError("entropy source gone")

    x = XChaCha20Poly1305(os.urandom(32))
    monkeypatch.setattr(xchacha_module.os, "urandom", broken)
    with pytest.raises(EncryptionFailure):
        x.encrypt(MSG, AAD)

# ── Concurrency ──────────────────────────────────────────────────────────────
def test_shared_primitive_across_threads():
    x = XChaCha20Poly1305(os.urandom(32))

    def roundtrip(i):
        pt = i.to_bytes(4, "big") * 8
        return x.decrypt(x.encrypt(pt, AAD), AAD) == pt

    with ThreadPoolExecutor(max_workers=8) as pool:
        assert all(pool.map(roundtrip, range(200)))

# ── AES-GCM ──────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("size", [16, 32])
def test_aes_gcm_roundtrip(size):
    a  = AesGcm(os.urandom(size))
    ct = a.encrypt(MSG, AAD)
    assert len(ct) == len(MSG) + 28
    assert a.decrypt(ct, AAD) == MSG

@pytest.mark.parametrize("size", [15, 24, 33])
def test_aes_gcm_rejects_wrong_key_length(size):
    with pytest.raises(InvalidKeyMaterial):
        AesGcm(os.urandom(size))

def test_aes_gcm_tamper_detected():
    a  = AesGcm(os.urandom(32))
    ct = bytearray(a.encrypt(MSG, AAD))
    ct[20] ^= 0xFF
    with pytest.raises(AuthenticationFailure):
        a.decrypt(bytes(ct), AAD)

def test_aes_gcm_short_input_rejected():
    with pytest.raises(AuthenticationFailure):
        AesGcm(os.urandom(32)).decrypt(b"\x00" * 27)
