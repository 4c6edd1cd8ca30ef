"""
Sistema de temas para la interfaz CLI de pymanager.

El paquete esta organizado en modulos:
- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- styled: Funciones que retornan objetos Text estilizados
- printing: Funciones que imprimen directamente a consola
- tables: Funciones para crear tablas Rich
"""

from pymanager.cli.theme.palette import (
    ColorPalette,
    THEME_DEFAULT,
    THEME_MONOKAI,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from pymanager.cli.theme.styled import (
    styled_title,
    styled_success,
    styled_warning,
    styled_muted,
    styled_version,
    styled_project_line,
)

from pymanager.cli.theme.printing import (
    print_line,
    print_title,
    print_success,
    print_warning,
    print_empty,
)

from pymanager.cli.theme.tables import (
    LOG_TABLE_COLUMNS,
    create_log_table,
)

__all__ = [
    # palette
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_MONOKAI",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # styled
    "styled_title",
    "styled_success",
    "styled_warning",
    "styled_muted",
    "styled_version",
    "styled_project_line",
    # printing
    "print_line",
    "print_title",
    "print_success",
    "print_warning",
    "print_empty",
    # tables
    "LOG_TABLE_COLUMNS",
    "create_log_table",
]
