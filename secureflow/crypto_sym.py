# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Sobre AES-256-GCM protegido por contraseña.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado para proteger texto del usuario.

Cada llamada a :func:`symmetric_encrypt` genera una salt y un nonce nuevos,
por lo que también deriva una clave nueva. No existe forma de reutilizar una
clave derivada entre llamadas.
"""

import logging
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from secureflow.constants import NONCE_SIZE, SALT_SIZE
from secureflow.crypto_kdf import Password, derive_key
from secureflow.encoding import b64decode, b64encode, pack_envelope, unpack_envelope, utf8_bytes
from secureflow.errors import AuthenticationError

logger = logging.getLogger(__name__)

_AUTH_FAILED = "Decryption failed: authentication tag mismatch"


def symmetric_encrypt(plaintext: str, password: Password) -> str:
    """Cifra texto con AES-256-GCM y una clave derivada de la contraseña.

    Args:
        plaintext (str): Texto en claro; se cifra su codificación UTF-8.
        password (str | bytes): Contraseña del usuario.

    Returns:
        str: Base64 de salt || nonce || ciphertext || tag.

    """

    salt = os.urandom(SALT_SIZE)
    nonce = os.urandom(NONCE_SIZE)
    key = derive_key(password, salt)
    ct_full = AESGCM(key).encrypt(nonce, utf8_bytes(plaintext, what="plaintext"), None)
    logger.debug("Encrypted %d-byte envelope", SALT_SIZE + NONCE_SIZE + len(ct_full))
    return b64encode(pack_envelope(salt, nonce, ct_full))


def symmetric_decrypt(blob: str, password: Password) -> str:
    """Descifra un sobre generado por :func:`symmetric_encrypt`.

    Args:
        blob (str): Sobre codificado en Base64.
        password (str | bytes): Contraseña usada al cifrar.

    Returns:
        str: Texto original.

    Raises:
        MalformedInputError: Si el Base64 es inválido o faltan bytes de cabecera.
        AuthenticationError: Si la etiqueta no verifica. No distingue entre
            contraseña incorrecta y datos alterados.

    """

    parts = unpack_envelope(b64decode(blob, what="envelope"))
    key = derive_key(password, parts.salt)
    try:
        data = AESGCM(key).decrypt(parts.nonce, parts.ciphertext, None)
        return data.decode("utf-8")
    except (InvalidTag, UnicodeDecodeError):
        logger.debug("Envelope authentication failed")
        raise AuthenticationError(_AUTH_FAILED) from None
