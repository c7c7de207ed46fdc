# --------------------------------------------------------------
# File: constants.py
# Description: Parámetros fijos de la suite criptográfica del sobre.
# --------------------------------------------------------------
"""Constantes compartidas por la derivación, el sobre simétrico y RSA."""

# PBKDF2-HMAC-SHA256: coste fijo, igual en cifrado y descifrado.
PBKDF2_ITERATIONS = 100_000
KEY_SIZE = 32

# Formato del sobre simétrico: salt(16) || nonce(12) || ciphertext || tag(16).
SALT_SIZE = 16
NONCE_SIZE = 12
TAG_SIZE = 16
HEADER_SIZE = SALT_SIZE + NONCE_SIZE

# RSA-OAEP con SHA-256 como hash OAEP y MGF1.
RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537
OAEP_HASH_SIZE = 32
