# --------------------------------------------------------------
# File: digest.py
# Description: Huellas SHA-256 y SHA-512 de texto en hexadecimal.
# --------------------------------------------------------------
"""Resúmenes criptográficos sin estado sobre la codificación UTF-8 del texto."""

import hashlib

from secureflow.encoding import utf8_bytes


def sha256(text: str) -> str:
    """Calcula el SHA-256 de ``text`` (64 caracteres hex en minúscula)."""

    return hashlib.sha256(utf8_bytes(text)).hexdigest()


def sha512(text: str) -> str:
    """Calcula el SHA-512 de ``text`` (128 caracteres hex en minúscula)."""

    return hashlib.sha512(utf8_bytes(text)).hexdigest()
