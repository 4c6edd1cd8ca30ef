"""
Visor interactivo de terminal.
"""

from pymanager.cli.viewer.table_viewer import (
    build_display,
    build_log_table,
    interactive_table_viewer,
)

__all__ = [
    "build_display",
    "build_log_table",
    "interactive_table_viewer",
]
