from .aes_gcm           import AesGcm
from .xchacha20poly1305 import XChaCha20Poly1305

__all__ = ["AesGcm", "XChaCha20Poly1305"]
