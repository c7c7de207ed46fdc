# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves simétricas mediante PBKDF2-HMAC-SHA256.
# --------------------------------------------------------------
"""Funciones de derivación de claves a partir de la contraseña del usuario."""

from __future__ import annotations

import logging
from typing import Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from secureflow.constants import KEY_SIZE, PBKDF2_ITERATIONS, SALT_SIZE
from secureflow.encoding import utf8_bytes
from secureflow.errors import MalformedInputError

logger = logging.getLogger(__name__)

Password = Union[str, bytes]


def password_bytes(password: Password) -> bytes:
    """Normaliza la contraseña a bytes (UTF-8 si llega como texto)."""

    if isinstance(password, str):
        return utf8_bytes(password, what="password")
    if isinstance(password, (bytes, bytearray, memoryview)):
        return bytes(password)
    raise TypeError("password must be str or bytes")


def derive_key(password: Password, salt: bytes) -> bytes:
    """Deriva una clave AES-256 usando PBKDF2 con HMAC-SHA256.

    El número de iteraciones es fijo para que la salt guardada en el sobre
    reproduzca la misma clave al descifrar. Una contraseña vacía se acepta.

    Args:
        password (str | bytes): Contraseña del usuario.
        salt (bytes): Salt aleatoria de 16 bytes asociada al sobre.

    Returns:
        bytes: Clave simétrica de 256 bits; no se almacena en ningún sitio.

    Raises:
        MalformedInputError: Si la salt no mide 16 bytes.

    """

    if len(salt) != SALT_SIZE:
        raise MalformedInputError(f"salt must be {SALT_SIZE} bytes, got {len(salt)}")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_SIZE,
        salt=bytes(salt),
        iterations=PBKDF2_ITERATIONS,
    )
    key = kdf.derive(password_bytes(password))
    logger.debug(
        "Derived %d-bit key with PBKDF2-HMAC-SHA256 (%d iterations)",
        KEY_SIZE * 8,
        PBKDF2_ITERATIONS,
    )
    return key
