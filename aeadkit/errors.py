"""
Error taxonomy
==============
Every failure raised by aeadkit derives from AeadKitError. Each class also
derives from the builtin a caller would otherwise expect (ValueError for bad
input, RuntimeError for environment failures), so plain ``except ValueError``
call sites keep working.
"""


class AeadKitError(Exception):
    """Base class for all aeadkit errors."""


class InvalidKeySize(AeadKitError, ValueError):
    """Key material length does not match the algorithm's key size."""


class InvalidKeyVersion(AeadKitError, ValueError):
    """Key version is not the version this manager supports."""


class InvalidKeyMaterial(AeadKitError, ValueError):
    """A primitive was handed raw key bytes of the wrong length."""


class InvalidKeyFormat(AeadKitError, ValueError):
    """A key format is missing or carries unsupported parameters."""


class DeserializationFailure(AeadKitError, ValueError):
    """Wire bytes do not parse into the expected message."""


class AuthenticationFailure(AeadKitError, ValueError):
    """Ciphertext could not be authenticated.

    Raised with the same message whether the input was truncated, the tag did
    not match, or the associated data differed.
    """

    MESSAGE = "decryption failed: message authentication failed"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class EncryptionFailure(AeadKitError, RuntimeError):
    """The system random source could not produce a nonce."""
