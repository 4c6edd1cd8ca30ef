"""
Comando show-table.
"""

from pymanager.cli.common import get_store
from pymanager.cli.viewer import interactive_table_viewer
from pymanager.logger import get_logger
from pymanager.models import LogRow
from pymanager.scanner import discover_versions

logger = get_logger(__name__)


def collect_table_rows() -> list[LogRow]:
    """Filas (versión, proyecto) de todas las versiones descubiertas."""
    versions = discover_versions()
    for version in versions:
        logger.debug("Python version listed: %s", version)
    return get_store().collect_rows(versions)


def show_table() -> None:
    """Show projects in a table."""
    rows = collect_table_rows()
    interactive_table_viewer(rows)
