"""
Logging de diagnóstico.

Los mensajes van a stderr mediante RichHandler, separados de la salida
de los comandos que se imprime en stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from pymanager.config import get_settings

ROOT_LOGGER = "pymanager"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configura el logger raíz de pymanager.

    Args:
        level: Nivel a aplicar. Si es None se toma de la configuración.

    Returns:
        Logger raíz configurado
    """
    if level is None:
        level = get_settings().log_level.value

    logger = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Obtiene un logger hijo de pymanager para un módulo."""
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
