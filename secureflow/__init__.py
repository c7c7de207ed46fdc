# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las operaciones del sobre criptográfico.
# --------------------------------------------------------------
"""Sobre criptográfico: AES-256-GCM con contraseña, SHA-2 y RSA-OAEP."""

from secureflow.crypto_asym import asymmetric_decrypt, asymmetric_encrypt, generate_key_pair
from secureflow.crypto_kdf import derive_key
from secureflow.crypto_sym import symmetric_decrypt, symmetric_encrypt
from secureflow.digest import sha256, sha512
from secureflow.errors import (
    AuthenticationError,
    DecryptionError,
    EnvelopeError,
    KeyImportError,
    MalformedInputError,
    PlaintextTooLargeError,
)
from secureflow.models import EnvelopeParts, KeyPair

__version__ = "0.1.0"

__all__ = [
    "derive_key",
    "symmetric_encrypt",
    "symmetric_decrypt",
    "sha256",
    "sha512",
    "generate_key_pair",
    "asymmetric_encrypt",
    "asymmetric_decrypt",
    "KeyPair",
    "EnvelopeParts",
    "EnvelopeError",
    "MalformedInputError",
    "AuthenticationError",
    "DecryptionError",
    "PlaintextTooLargeError",
    "KeyImportError",
]
