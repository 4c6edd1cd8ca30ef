"""
Funciones que imprimen directamente a la consola.
"""

from rich.text import Text

from pymanager.cli.theme.palette import get_console
from pymanager.cli.theme.styled import (
    styled_title, styled_success, styled_warning, styled_muted,
)


def print_line(text: Text) -> None:
    """Imprime una línea sin cortarla al ancho del terminal."""
    console = get_console()
    console.print(text, soft_wrap=True)


def print_title(text: str) -> None:
    """Imprime el encabezado de un listado."""
    print_line(styled_title(text))


def print_success(text: str) -> None:
    """Imprime mensaje de éxito."""
    print_line(styled_success(text))


def print_warning(text: str) -> None:
    """Imprime advertencia."""
    print_line(styled_warning(text))


def print_empty(text: str) -> None:
    """Imprime un mensaje de resultado vacío."""
    print_line(styled_muted(text))
