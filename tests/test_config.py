# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de la configuración de las herramientas CLI.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

import secureflow.config as config_module


@pytest.fixture
def reload_config(monkeypatch) -> Iterator:
    """Recarga secureflow.config con un SECUREFLOW_LOG_LEVEL dado.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para modificar variables de entorno.

    Returns:
        Iterator: Función que fija el nivel y devuelve el módulo recargado.
    """

    def _reload(level: str):
        monkeypatch.setenv("SECUREFLOW_LOG_LEVEL", level)
        return importlib.reload(config_module)

    yield _reload
    monkeypatch.delenv("SECUREFLOW_LOG_LEVEL", raising=False)
    importlib.reload(config_module)


@pytest.mark.parametrize("level, expected", [("debug", "DEBUG"), ("ERROR", "ERROR")])
def test_log_level_from_environment(reload_config, level, expected):
    assert reload_config(level).LOG_LEVEL == expected


@pytest.mark.parametrize("level", ["VERBOSE", "loud", ""])
def test_unknown_log_level_falls_back_to_warning(reload_config, level):
    """Un nivel desconocido no llega a ``logging.basicConfig``.

    Args:
        reload_config (Callable): Fixture que recarga la configuración.
        level (str): Nivel inválido configurado en el entorno.
    """
    assert reload_config(level).LOG_LEVEL == "WARNING"
