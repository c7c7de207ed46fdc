# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

import base64
import binascii

from pydantic import BaseModel, ConfigDict, Field, field_validator

from secureflow.constants import NONCE_SIZE, SALT_SIZE


class EnvelopeParts(BaseModel):
    """Representa un sobre simétrico ya desempaquetado.

    Attributes:
        salt (bytes): Salt de 16 bytes usada para derivar la clave.
        nonce (bytes): Vector de inicialización AES-GCM de 96 bits.
        ciphertext (bytes): Datos cifrados seguidos de la etiqueta de 16 bytes.

    """

    model_config = ConfigDict(frozen=True)

    salt: bytes
    nonce: bytes
    ciphertext: bytes

    @field_validator("salt")
    @classmethod
    def _check_salt(cls, value: bytes) -> bytes:
        if len(value) != SALT_SIZE:
            raise ValueError(f"salt must be {SALT_SIZE} bytes, got {len(value)}")
        return value

    @field_validator("nonce")
    @classmethod
    def _check_nonce(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"nonce must be {NONCE_SIZE} bytes, got {len(value)}")
        return value


class KeyPair(BaseModel):
    """Par de claves RSA exportado y codificado en Base64.

    La clave privada queda fuera de ``repr`` para que no acabe en trazas.

    Attributes:
        public_key (str): SubjectPublicKeyInfo DER en Base64 estándar.
        private_key (str): PKCS#8 DER en Base64 estándar.

    """

    model_config = ConfigDict(frozen=True)

    public_key: str
    private_key: str = Field(repr=False)

    @field_validator("public_key", "private_key")
    @classmethod
    def _check_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("key must be standard Base64") from None
        return value
