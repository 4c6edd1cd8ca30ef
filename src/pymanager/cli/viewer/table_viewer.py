"""
Visor interactivo de la tabla de proyectos.

Muestra todas las filas (versión, proyecto) en pantalla completa hasta
que el usuario presiona q. Las filas se calculan una sola vez antes de
entrar al visor.
"""

from contextlib import nullcontext
from typing import Callable, Optional

from rich.console import Console, Group
from rich.live import Live
from rich.table import Table
from rich.text import Text

from pymanager.cli.theme import create_log_table, get_console, get_palette
from pymanager.cli.viewer.terminal import raw_terminal
from pymanager.logger import get_logger
from pymanager.models import LogRow

logger = get_logger(__name__)

QUIT_KEY = "q"
TABLE_TITLE = "Python Projects"


def build_log_table(rows: list[LogRow], title: str = TABLE_TITLE) -> Table:
    """
    Construye la tabla del registro.

    Args:
        rows: Filas (versión, proyecto) a mostrar
        title: Título de la tabla

    Returns:
        Rich Table con encabezados aunque no haya filas
    """
    table = create_log_table(title)

    for row in rows:
        project = row.project
        table.add_row(
            Text(row.version),
            Text(project.name),
            Text(str(project.created_at)),
            Text(str(project.last_accessed)),
        )

    return table


def build_display(rows: list[LogRow]) -> Group:
    """Tabla más barra de ayuda inferior."""
    p = get_palette()

    footer = Text()
    footer.append(f"  {len(rows)} projects", style=p.muted)
    footer.append("  |  ", style=p.border)
    footer.append("[q]", style=f"bold {p.nav_key}")
    footer.append(" quit", style=p.muted)

    return Group(build_log_table(rows), footer)


def interactive_table_viewer(
    rows: list[LogRow],
    console: Optional[Console] = None,
    read_key: Optional[Callable[[], str]] = None,
) -> None:
    """
    Visor de tabla en pantalla completa.

    Estados: en ejecución hasta recibir la tecla q, luego terminado.
    Cualquier otra tecla redibuja la misma tabla y sigue esperando.

    Args:
        rows: Filas a mostrar (no se recargan durante el visor)
        console: Consola Rich. Default: consola con tema
        read_key: Fuente de teclas. Default: stdin en modo raw
    """
    if console is None:
        console = get_console()

    if read_key is None:
        terminal = raw_terminal()
    else:
        terminal = nullcontext(read_key)

    logger.debug("Visor de tabla con %d filas", len(rows))

    # El orden de los with garantiza: primero se sale de la pantalla
    # alternativa y se muestra el cursor, luego se restaura el terminal
    with terminal as next_key:
        with Live(console=console, auto_refresh=False, screen=True) as live:
            while True:
                live.update(build_display(rows), refresh=True)

                # Esperar input (bloqueante)
                key = next_key()
                if key == QUIT_KEY:
                    break
