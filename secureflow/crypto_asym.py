# --------------------------------------------------------------
# File: crypto_asym.py
# Description: Generación de claves RSA y cifrado de un bloque con RSA-OAEP.
# --------------------------------------------------------------
"""Abstracciones criptográficas para generación de claves y cifrado RSA-OAEP.

RSA-OAEP cifra un único bloque: el texto no puede superar
``bytes_del_módulo - 2 * 32 - 2`` (190 bytes con claves de 2048 bits). No se
implementa cifrado híbrido.
"""

import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from secureflow.constants import OAEP_HASH_SIZE, RSA_KEY_SIZE, RSA_PUBLIC_EXPONENT
from secureflow.encoding import b64decode, b64encode, utf8_bytes
from secureflow.errors import DecryptionError, KeyImportError, PlaintextTooLargeError
from secureflow.models import KeyPair

logger = logging.getLogger(__name__)

_DECRYPTION_FAILED = "Decryption failed"


def _oaep() -> padding.OAEP:
    """Relleno OAEP con SHA-256 como hash principal y de MGF1."""

    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def max_plaintext_size(key_size: int) -> int:
    """Devuelve la capacidad en bytes de un bloque RSA-OAEP(SHA-256).

    Args:
        key_size (int): Tamaño del módulo en bits.

    Returns:
        int: Longitud máxima del texto en claro.

    """

    return (key_size + 7) // 8 - 2 * OAEP_HASH_SIZE - 2


def generate_key_pair() -> KeyPair:
    """Genera un par RSA de 2048 bits con exponente público 65537.

    Es una operación costosa; los llamadores sensibles a la latencia deberían
    usar :func:`secureflow.aio.generate_key_pair`.

    Returns:
        KeyPair: Clave pública SubjectPublicKeyInfo y privada PKCS#8, ambas DER
        en Base64.

    """

    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_SIZE,
    )
    pub_der = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    priv_der = private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    logger.debug("Generated RSA-%d key pair", RSA_KEY_SIZE)
    return KeyPair(public_key=b64encode(pub_der), private_key=b64encode(priv_der))


def load_public_key(public_key_b64: str) -> rsa.RSAPublicKey:
    """Importa una clave pública RSA en SubjectPublicKeyInfo DER (Base64).

    Args:
        public_key_b64 (str): Clave pública exportada por :func:`generate_key_pair`.

    Returns:
        rsa.RSAPublicKey: Clave lista para cifrar.

    Raises:
        MalformedInputError: Si el Base64 es inválido.
        KeyImportError: Si los bytes no son una clave RSA SPKI de al menos 2048 bits.

    """

    der = b64decode(public_key_b64, what="public key")
    try:
        key = serialization.load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise KeyImportError("Public key is not a DER SubjectPublicKeyInfo") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise KeyImportError("Public key is not an RSA key")
    # El cargador también acepta PKCS#1; sólo se admite SPKI.
    canonical = key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    if canonical != der:
        raise KeyImportError("Public key is not a DER SubjectPublicKeyInfo")
    if key.key_size < RSA_KEY_SIZE:
        raise KeyImportError(f"RSA key too small: {key.key_size} bits (minimum {RSA_KEY_SIZE})")
    return key


def load_private_key(private_key_b64: str) -> rsa.RSAPrivateKey:
    """Importa una clave privada RSA en PKCS#8 DER (Base64) sin cifrar.

    Raises:
        MalformedInputError: Si el Base64 es inválido.
        KeyImportError: Si los bytes no son una clave RSA PKCS#8 de al menos 2048 bits.

    """

    der = b64decode(private_key_b64, what="private key")
    try:
        key = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm):
        raise KeyImportError("Private key is not an unencrypted DER PKCS#8") from None
    if not isinstance(key, rsa.RSAPrivateKey):
        raise KeyImportError("Private key is not an RSA key")
    canonical = key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    if canonical != der:
        raise KeyImportError("Private key is not an unencrypted DER PKCS#8")
    if key.key_size < RSA_KEY_SIZE:
        raise KeyImportError(f"RSA key too small: {key.key_size} bits (minimum {RSA_KEY_SIZE})")
    return key


def asymmetric_encrypt(text: str, public_key_b64: str) -> str:
    """Cifra texto con RSA-OAEP(SHA-256) usando la clave pública indicada.

    Args:
        text (str): Texto en claro; se cifra su codificación UTF-8.
        public_key_b64 (str): Clave pública SPKI DER en Base64.

    Returns:
        str: Ciphertext en Base64.

    Raises:
        PlaintextTooLargeError: Si el texto no cabe en un bloque. Nunca se trunca.
        MalformedInputError: Si la clave no es Base64 válido.
        KeyImportError: Si la clave no se puede importar.

    """

    public_key = load_public_key(public_key_b64)
    data = utf8_bytes(text, what="plaintext")
    limit = max_plaintext_size(public_key.key_size)
    if len(data) > limit:
        raise PlaintextTooLargeError(len(data), limit)
    ciphertext = public_key.encrypt(data, _oaep())
    logger.debug("Encrypted %d-byte RSA-OAEP block", len(ciphertext))
    return b64encode(ciphertext)


def asymmetric_decrypt(ciphertext_b64: str, private_key_b64: str) -> str:
    """Descifra un bloque RSA-OAEP(SHA-256) con la clave privada indicada.

    Args:
        ciphertext_b64 (str): Ciphertext en Base64.
        private_key_b64 (str): Clave privada PKCS#8 DER en Base64.

    Returns:
        str: Texto original.

    Raises:
        MalformedInputError: Si el ciphertext o la clave no son Base64 válido.
        KeyImportError: Si la clave no se puede importar.
        DecryptionError: Ante cualquier fallo de descifrado, sin detallar la causa.

    """

    private_key = load_private_key(private_key_b64)
    ciphertext = b64decode(ciphertext_b64, what="ciphertext")
    try:
        # ValueError cubre relleno inválido, longitud incorrecta y UTF-8 inválido.
        return private_key.decrypt(ciphertext, _oaep()).decode("utf-8")
    except ValueError:
        logger.debug("RSA-OAEP decryption failed")
        raise DecryptionError(_DECRYPTION_FAILED) from None
