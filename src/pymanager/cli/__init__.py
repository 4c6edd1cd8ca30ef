"""
CLI de pymanager.

Comandos:
- list-python-versions: versiones de Python instaladas
- list-python-projects: proyectos registrados para una versión
- add-project: registra un proyecto para una versión
- show-table: tabla interactiva con todos los registros
"""

from typing import Annotated, Optional

import typer

from pymanager import __version__
from pymanager.cli.projects import add_project, list_python_projects
from pymanager.cli.table import show_table
from pymanager.cli.theme import CLITheme
from pymanager.cli.versions import list_python_versions
from pymanager.config import get_settings
from pymanager.logger import configure_logging

app = typer.Typer(
    name="pymanager",
    help="A tool to manage Python environments and projects",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

app.command("list-python-versions")(list_python_versions)
app.command("list-python-projects")(list_python_projects)
app.command("add-project")(add_project)
app.command("show-table")(show_table)


def version_callback(value: bool):
    if value:
        typer.echo(f"pymanager v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version", callback=version_callback, is_eager=True,
            help="Show the version and exit",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print diagnostic logging to stderr"),
    ] = False,
):
    """Track which projects were worked on with each installed Python version."""
    settings = get_settings()
    CLITheme.set_theme(settings.theme)
    configure_logging("DEBUG" if verbose else settings.log_level.value)


__all__ = [
    "app",
]
