"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from pymanager.config import ThemeName


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    primary: str      # Títulos, destacados
    secondary: str    # Encabezados de tabla
    accent: str       # Nombres de versión

    success: str      # Proyecto agregado
    warning: str      # Proyecto duplicado
    info: str         # Listados
    muted: str        # Mensajes sin resultados, ayuda de teclas

    number: str       # Timestamps
    border: str       # Bordes de tabla
    nav_key: str      # Teclas en la barra de ayuda


# Tema por defecto - colores pasteles
THEME_DEFAULT = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#af87af",       # Púrpura suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo/naranja suave
    info="#5f87af",         # Azul info
    muted="#808080",        # Gris
    number="#d7af5f",       # Amarillo para números
    border="#5f5f5f",       # Gris oscuro para bordes
    nav_key="#af87af",      # Púrpura para teclas
)

THEME_MONOKAI = ColorPalette(
    primary="#66d9ef",
    secondary="#a6e22e",
    accent="#ae81ff",
    success="#a6e22e",
    warning="#e6db74",
    info="#66d9ef",
    muted="#75715e",
    number="#fd971f",
    border="#49483e",
    nav_key="#ae81ff",
)

# Solo grises y un acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",
    success="#87d787",
    warning="#ffd787",
    info="#5fafff",
    muted="#606060",
    number="#ffffff",
    border="#404040",
    nav_key="#5fafff",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.MONOKAI: THEME_MONOKAI,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)

    @classmethod
    def get_palette(cls) -> ColorPalette:
        """Obtiene la paleta de colores actual."""
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich compartida."""
        if cls._console is None:
            cls._console = Console()
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich compartida."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
