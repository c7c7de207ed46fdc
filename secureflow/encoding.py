# --------------------------------------------------------------
# File: encoding.py
# Description: Utilidades Base64 y empaquetado binario del sobre simétrico.
# --------------------------------------------------------------
"""Convenciones de codificación compartidas por los sobres simétrico y RSA."""

from __future__ import annotations

import base64
import binascii

from secureflow.constants import HEADER_SIZE, NONCE_SIZE, SALT_SIZE
from secureflow.errors import MalformedInputError
from secureflow.models import EnvelopeParts

__all__ = ["b64encode", "b64decode", "pack_envelope", "unpack_envelope", "utf8_bytes"]


def utf8_bytes(text: str, *, what: str = "text") -> bytes:
    """Codifica texto en UTF-8 rechazando surrogates sueltos.

    Args:
        text (str): Texto a codificar.
        what (str): Nombre del dato para el mensaje de error.

    Returns:
        bytes: Codificación UTF-8 del texto.

    Raises:
        MalformedInputError: Si el texto contiene surrogates sin pareja.

    """

    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        raise MalformedInputError(f"{what} is not valid Unicode text") from None


def b64encode(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def b64decode(value: str, *, what: str = "input") -> bytes:
    """Decodifica Base64 estándar de forma estricta.

    Args:
        value (str): Texto Base64 (alfabeto estándar, con relleno).
        what (str): Nombre del dato para el mensaje de error.

    Returns:
        bytes: Datos binarios decodificados.

    Raises:
        MalformedInputError: Si el valor no es Base64 válido.

    """

    if not isinstance(value, (str, bytes)):
        raise MalformedInputError(f"{what} must be a Base64 string")
    try:
        return base64.b64decode(value.strip(), validate=True)
    except (binascii.Error, ValueError):
        raise MalformedInputError(f"{what} is not valid Base64") from None


def pack_envelope(salt: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """Concatena salt || nonce || ciphertext (la etiqueta va al final)."""

    parts = EnvelopeParts(salt=salt, nonce=nonce, ciphertext=ciphertext)
    return parts.salt + parts.nonce + parts.ciphertext


def unpack_envelope(data: bytes) -> EnvelopeParts:
    """Separa un sobre binario en sus componentes.

    Args:
        data (bytes): Sobre ya decodificado de Base64.

    Returns:
        EnvelopeParts: Salt, nonce y ciphertext con etiqueta.

    Raises:
        MalformedInputError: Si faltan bytes para salt y nonce.

    """

    if len(data) < HEADER_SIZE:
        raise MalformedInputError(
            f"Envelope too short: {len(data)} bytes (minimum {HEADER_SIZE})"
        )
    return EnvelopeParts(
        salt=data[:SALT_SIZE],
        nonce=data[SALT_SIZE:HEADER_SIZE],
        ciphertext=data[SALT_SIZE + NONCE_SIZE :],
    )
