# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones expuesta por el sobre criptográfico.
# --------------------------------------------------------------
"""Taxonomía de errores del núcleo criptográfico.

Los mensajes nunca incluyen contraseñas, claves ni texto en claro.
"""

from __future__ import annotations


class EnvelopeError(Exception):
    """Excepción base para todos los errores del sobre."""

    pass


class MalformedInputError(EnvelopeError, ValueError):
    """Blob, clave o Base64 estructuralmente inválidos."""

    pass


class AuthenticationError(EnvelopeError):
    """La etiqueta AES-GCM no verifica (contraseña o datos incorrectos)."""

    pass


class DecryptionError(EnvelopeError):
    """Fallo genérico al quitar el relleno RSA-OAEP."""

    pass


class PlaintextTooLargeError(EnvelopeError, ValueError):
    """El texto supera la capacidad de un único bloque RSA-OAEP.

    Attributes:
        size (int): Longitud en bytes del texto recibido.
        limit (int): Máximo admitido por la clave utilizada.
    """

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Plaintext too large for RSA-OAEP: {size} bytes (max {limit})")


class KeyImportError(EnvelopeError):
    """Los bytes de la clave no corresponden al formato esperado."""

    pass
