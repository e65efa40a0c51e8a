from .base                          import KeyManager
from .aes_gcm_key_manager           import AesGcmKeyManager
from .xchacha20poly1305_key_manager import XChaCha20Poly1305KeyManager

__all__ = ["KeyManager", "AesGcmKeyManager", "XChaCha20Poly1305KeyManager"]
