# --------------------------------------------------------------
# File: config.py
# Description: Configuración de las herramientas de línea de comandos.
# --------------------------------------------------------------
# El núcleo criptográfico no importa este módulo.
import logging
import os
from dotenv import load_dotenv
load_dotenv()

_level = os.getenv("SECUREFLOW_LOG_LEVEL", "WARNING").upper()
# Un nivel desconocido haría fallar logging.basicConfig.
LOG_LEVEL = _level if isinstance(logging.getLevelName(_level), int) else "WARNING"
PASSWORD_ENV = "SECUREFLOW_PASSWORD"
