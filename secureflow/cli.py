# --------------------------------------------------------------
# File: cli.py
# Description: Herramientas de línea de comandos sobre el sobre criptográfico.
# --------------------------------------------------------------
"""Capa de presentación mínima: invoca las operaciones y muestra resultados.

Los errores del núcleo se traducen a mensajes genéricos sin secretos.
"""

from __future__ import annotations

import argparse
import getpass
import logging
import os
import sys
from typing import List, Optional

from secureflow import config
from secureflow.crypto_asym import asymmetric_decrypt, asymmetric_encrypt, generate_key_pair
from secureflow.crypto_sym import symmetric_decrypt, symmetric_encrypt
from secureflow.digest import sha256, sha512
from secureflow.errors import AuthenticationError, DecryptionError, EnvelopeError

logger = logging.getLogger(__name__)


def _password(args: argparse.Namespace) -> str:
    """Obtiene la contraseña de la opción, del entorno o de un prompt."""

    if args.password is not None:
        return args.password
    env_value = os.getenv(config.PASSWORD_ENV)
    if env_value is not None:
        return env_value
    return getpass.getpass("Password: ")


def _cmd_hash(args: argparse.Namespace) -> None:
    print(f"SHA-256: {sha256(args.text)}")
    print(f"SHA-512: {sha512(args.text)}")


def _cmd_encrypt(args: argparse.Namespace) -> None:
    print(symmetric_encrypt(args.text, args.password))


def _cmd_decrypt(args: argparse.Namespace) -> None:
    print(symmetric_decrypt(args.blob, args.password))


def _cmd_keygen(args: argparse.Namespace) -> None:
    pair = generate_key_pair()
    print("Public key:")
    print(pair.public_key)
    print("Private key:")
    print(pair.private_key)


def _cmd_rsa_encrypt(args: argparse.Namespace) -> None:
    print(asymmetric_encrypt(args.text, args.public_key))


def _cmd_rsa_decrypt(args: argparse.Namespace) -> None:
    print(asymmetric_decrypt(args.ciphertext, args.private_key))


def build_parser() -> argparse.ArgumentParser:
    """Construye el parser con un subcomando por operación."""

    parser = argparse.ArgumentParser(
        prog="secureflow",
        description="AES-256-GCM, SHA-2 and RSA-OAEP text tools",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("hash", help="SHA-256 and SHA-512 of TEXT")
    p.add_argument("text")
    p.set_defaults(func=_cmd_hash)

    p = sub.add_parser("encrypt", help="Encrypt TEXT with a password")
    p.add_argument("text")
    p.add_argument("--password", help=f"password (default: ${config.PASSWORD_ENV} or prompt)")
    p.set_defaults(func=_cmd_encrypt)

    p = sub.add_parser("decrypt", help="Decrypt a Base64 envelope with a password")
    p.add_argument("blob")
    p.add_argument("--password", help=f"password (default: ${config.PASSWORD_ENV} or prompt)")
    p.set_defaults(func=_cmd_decrypt)

    p = sub.add_parser("keygen", help="Generate an RSA-2048 key pair")
    p.set_defaults(func=_cmd_keygen)

    p = sub.add_parser("rsa-encrypt", help="Encrypt TEXT with an RSA public key")
    p.add_argument("text")
    p.add_argument("--public-key", required=True, help="SubjectPublicKeyInfo DER, Base64")
    p.set_defaults(func=_cmd_rsa_encrypt)

    p = sub.add_parser("rsa-decrypt", help="Decrypt CIPHERTEXT with an RSA private key")
    p.add_argument("ciphertext")
    p.add_argument("--private-key", required=True, help="PKCS#8 DER, Base64")
    p.set_defaults(func=_cmd_rsa_decrypt)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    # Los campos vacíos son un error de uso.
    for field in ("text", "blob", "ciphertext", "public_key", "private_key"):
        if getattr(args, field, None) == "":
            parser.error(f"{field} must not be empty")
    if hasattr(args, "password"):
        args.password = _password(args)
        if args.password == "":
            parser.error("password must not be empty")

    try:
        args.func(args)
    except AuthenticationError:
        print("Decryption failed - incorrect password or corrupted data", file=sys.stderr)
        return 1
    except DecryptionError:
        print("Decryption failed - wrong key or corrupted ciphertext", file=sys.stderr)
        return 1
    except EnvelopeError as exc:
        logger.debug("Operation failed: %s", type(exc).__name__)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
