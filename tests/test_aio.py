# --------------------------------------------------------------
# File: test_aio.py
# Description: Pruebas de los envoltorios asíncronos del sobre.
# --------------------------------------------------------------

import asyncio
import os

import pytest

from secureflow import aio
from secureflow.crypto_kdf import derive_key
from secureflow.errors import AuthenticationError


def test_async_symmetric_roundtrip():
    """El cifrado y descifrado asíncronos equivalen a los síncronos.

    Returns:
        None: Las aserciones comparan el texto recuperado.
    """

    async def scenario():
        blob = await aio.symmetric_encrypt("hola", b"pw")
        return await aio.symmetric_decrypt(blob, b"pw")

    assert asyncio.run(scenario()) == "hola"


def test_async_derive_key_matches_sync():
    salt = os.urandom(16)
    assert asyncio.run(aio.derive_key(b"pw", salt)) == derive_key(b"pw", salt)


def test_async_errors_propagate():
    """Las excepciones del hilo de trabajo llegan al ``await``."""

    async def scenario():
        blob = await aio.symmetric_encrypt("hola", b"pw")
        await aio.symmetric_decrypt(blob, b"otra")

    with pytest.raises(AuthenticationError):
        asyncio.run(scenario())


def test_async_operations_run_concurrently(fast_kdf):
    """Varias operaciones pueden esperarse a la vez con ``gather``."""

    async def scenario():
        blobs = await asyncio.gather(*(aio.symmetric_encrypt(str(i), b"pw") for i in range(8)))
        return await asyncio.gather(*(aio.symmetric_decrypt(b, b"pw") for b in blobs))

    assert asyncio.run(scenario()) == [str(i) for i in range(8)]


def test_async_asymmetric_roundtrip():
    """Genera claves y cifra con RSA-OAEP sin bloquear el bucle."""

    async def scenario():
        pair = await aio.generate_key_pair()
        ciphertext = await aio.asymmetric_encrypt("hola", pair.public_key)
        return await aio.asymmetric_decrypt(ciphertext, pair.private_key)

    assert asyncio.run(scenario()) == "hola"
