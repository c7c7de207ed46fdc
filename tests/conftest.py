# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para claves RSA y derivación acelerada.
# --------------------------------------------------------------

import pytest

from secureflow.crypto_asym import generate_key_pair
from secureflow.models import KeyPair


@pytest.fixture(scope="session")
def rsa_pair() -> KeyPair:
    """Genera un único par RSA para toda la sesión de pruebas.

    Returns:
        KeyPair: Claves pública y privada en Base64.
    """
    return generate_key_pair()


@pytest.fixture(scope="session")
def other_rsa_pair() -> KeyPair:
    """Segundo par RSA independiente para probar claves equivocadas."""
    return generate_key_pair()


@pytest.fixture
def fast_kdf(monkeypatch):
    """Reduce PBKDF2 a una iteración para pruebas con miles de llamadas.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para sustituir la constante.

    Returns:
        None: El parche se revierte al terminar la prueba.
    """
    monkeypatch.setattr("secureflow.crypto_kdf.PBKDF2_ITERATIONS", 1)
