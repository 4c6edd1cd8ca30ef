"""
Funciones para crear tablas Rich.
"""

from rich.table import Table
from rich import box

from pymanager.cli.theme.palette import get_palette

LOG_TABLE_COLUMNS = ("Version", "Project", "Created At", "Last Accessed")


def create_log_table(title: str = None) -> Table:
    """Crea la tabla de cuatro columnas del registro de proyectos."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        expand=True,
        padding=(0, 1),
    )

    table.add_column(LOG_TABLE_COLUMNS[0], style=f"bold {p.accent}", justify="left", ratio=1)
    table.add_column(LOG_TABLE_COLUMNS[1], justify="left", ratio=1)
    table.add_column(LOG_TABLE_COLUMNS[2], style=p.number, justify="right", ratio=1)
    table.add_column(LOG_TABLE_COLUMNS[3], style=p.number, justify="right", ratio=1)

    return table
