# --------------------------------------------------------------
# File: test_crypto_kdf.py
# Description: Pruebas de la derivación PBKDF2-HMAC-SHA256.
# --------------------------------------------------------------

import hashlib
import os

import pytest

from secureflow.crypto_kdf import derive_key
from secureflow.errors import MalformedInputError


def test_derive_key_matches_reference_pbkdf2():
    """Compara la clave derivada con ``hashlib.pbkdf2_hmac``.

    Returns:
        None: Las aserciones comprueban igualdad byte a byte.
    """
    salt = os.urandom(16)
    expected = hashlib.pbkdf2_hmac("sha256", b"correct horse", salt, 100_000, dklen=32)
    assert derive_key(b"correct horse", salt) == expected


def test_derive_key_is_deterministic_and_256_bits():
    """Misma contraseña y salt producen la misma clave de 32 bytes."""
    salt = os.urandom(16)
    k1 = derive_key(b"pw", salt)
    k2 = derive_key(b"pw", salt)
    assert k1 == k2
    assert len(k1) == 32


def test_derive_key_depends_on_salt():
    """Salts distintas dan claves distintas."""
    assert derive_key(b"pw", b"\x00" * 16) != derive_key(b"pw", b"\x01" * 16)


def test_derive_key_accepts_text_password_as_utf8():
    """Una contraseña ``str`` equivale a sus bytes UTF-8."""
    salt = os.urandom(16)
    assert derive_key("contraseña", salt) == derive_key("contraseña".encode("utf-8"), salt)


def test_derive_key_accepts_empty_password():
    """La contraseña vacía es débil pero válida."""
    key = derive_key(b"", os.urandom(16))
    assert len(key) == 32


@pytest.mark.parametrize("size", [0, 8, 15, 17, 32])
def test_derive_key_rejects_wrong_salt_size(size):
    """Una salt que no mide 16 bytes se considera malformada.

    Args:
        size (int): Longitud de salt a probar.
    """
    with pytest.raises(MalformedInputError):
        derive_key(b"pw", b"\x00" * size)
