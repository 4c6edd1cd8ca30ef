"""
Imports y utilidades comunes para módulos CLI.
"""

from typing import Annotated

import typer

from pymanager.cli.theme import (
    print_line,
    print_title,
    print_success,
    print_warning,
    print_empty,
    styled_version,
    styled_project_line,
)
from pymanager.store import ProjectLogStore


def get_store() -> ProjectLogStore:
    """
    Crea el almacén de registros para la invocación actual.

    Se construye en cada llamada para respetar la configuración vigente;
    no se mantiene estado entre comandos.
    """
    return ProjectLogStore()


__all__ = [
    "Annotated",
    "typer",
    "print_line",
    "print_title",
    "print_success",
    "print_warning",
    "print_empty",
    "styled_version",
    "styled_project_line",
    "get_store",
]
