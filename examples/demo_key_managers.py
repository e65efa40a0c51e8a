"""
aeadkit — Live Demo: Key Managers
=================================
Run:  python examples/demo_key_managers.py

Mints a key with each manager, stores it as a KeyData envelope, loads it
back through a type-URL lookup, and round-trips a message, printing
timing and bundle sizes for each.
"""

import sys, os, time
import logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from aeadkit import AuthenticationFailure, AesGcmKeyFormat
from aeadkit import AesGcmKeyManager, XChaCha20Poly1305KeyManager
from aeadkit import wire

LINE = "═" * 70
MSG  = b"Attack at dawn - keys validated before use."
AAD  = b"aeadkit-demo"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

if "-v" in sys.argv:
    logging.basicConfig(level=logging.DEBUG, format="  %(name)s: %(message)s")

managers = {km.key_type(): km for km in (XChaCha20Poly1305KeyManager(),
                                         AesGcmKeyManager())}
aes_format = wire.serialize_aes_gcm_key_format(AesGcmKeyFormat(key_size=32))

print(f"\n{LINE}")
print("  aeadkit — Key Manager Demo")
print(LINE)
print(f"  Message: {MSG.decode()}")

for type_url, km in managers.items():
    header(type_url.rsplit(".", 1)[-1])
    t0 = time.perf_counter()
    stored = wire.serialize_key_data(km.new_key_data(aes_format))
    kd     = wire.deserialize_key_data(stored)
    aead   = managers[kd.type_url].primitive_from_serialized_key(kd.value)
    ct     = aead.encrypt(MSG, AAD)
    pt     = aead.decrypt(ct, AAD)
    elapsed = time.perf_counter() - t0
    ok("Type URL",      kd.type_url)
    ok("Material type", kd.key_material_type.name)
    ok("KeyData size",  f"{len(stored)} bytes")
    ok("Bundle size",   f"{len(ct)} bytes (plaintext {len(MSG)} + {len(ct) - len(MSG)})")
    ok("Round-trip",    f"{elapsed*1000:.2f} ms")
    ok("Decrypted",     pt.decode())

    tampered = bytearray(ct)
    tampered[-1] ^= 0x01
    try:
        aead.decrypt(bytes(tampered), AAD)
        print("  ✗  Tamper NOT detected")
    except AuthenticationFailure:
        ok("Tamper detected")

print(f"\n{LINE}\n")
