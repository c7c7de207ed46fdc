# --------------------------------------------------------------
# File: aio.py
# Description: Variantes asíncronas que delegan el trabajo costoso en hilos.
# --------------------------------------------------------------
"""Envoltorios ``async`` para anfitriones con bucle de eventos.

PBKDF2 y la generación RSA son operaciones de CPU que bloquearían el bucle;
aquí se ejecutan con :func:`asyncio.to_thread`. Cancelar la tarea descarta el
resultado, pero la primitiva termina igualmente en su hilo.
"""

from __future__ import annotations

import asyncio

from secureflow import crypto_asym, crypto_kdf, crypto_sym
from secureflow.crypto_kdf import Password
from secureflow.models import KeyPair

__all__ = [
    "derive_key",
    "symmetric_encrypt",
    "symmetric_decrypt",
    "generate_key_pair",
    "asymmetric_encrypt",
    "asymmetric_decrypt",
]


async def derive_key(password: Password, salt: bytes) -> bytes:
    return await asyncio.to_thread(crypto_kdf.derive_key, password, salt)


async def symmetric_encrypt(plaintext: str, password: Password) -> str:
    return await asyncio.to_thread(crypto_sym.symmetric_encrypt, plaintext, password)


async def symmetric_decrypt(blob: str, password: Password) -> str:
    return await asyncio.to_thread(crypto_sym.symmetric_decrypt, blob, password)


async def generate_key_pair() -> KeyPair:
    return await asyncio.to_thread(crypto_asym.generate_key_pair)


async def asymmetric_encrypt(text: str, public_key_b64: str) -> str:
    return await asyncio.to_thread(crypto_asym.asymmetric_encrypt, text, public_key_b64)


async def asymmetric_decrypt(ciphertext_b64: str, private_key_b64: str) -> str:
    return await asyncio.to_thread(crypto_asym.asymmetric_decrypt, ciphertext_b64, private_key_b64)
