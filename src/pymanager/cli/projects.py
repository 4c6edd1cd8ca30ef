"""
Comandos sobre el registro de proyectos de una versión.
"""

from pymanager.cli.common import (
    Annotated,
    typer,
    get_store,
    print_empty,
    print_line,
    print_success,
    print_title,
    print_warning,
    styled_project_line,
)


def list_python_projects(
    version: Annotated[str, typer.Argument(help="Python version (e.g. 3.11)")],
) -> None:
    """List all projects worked on by a specific Python version."""
    log = get_store().load(version)

    if not log.projects:
        print_empty(f"No projects found for Python version {version}")
        return

    print_title(f"Projects worked on by Python version {version}:")
    for project in log.projects:
        print_line(styled_project_line(
            project.name, project.created_at, project.last_accessed,
        ))


def add_project(
    version: Annotated[str, typer.Argument(help="Python version (e.g. 3.11)")],
    project: Annotated[str, typer.Argument(help="Project name")],
) -> None:
    """Add a project to the log for a specific Python version."""
    added = get_store().add_project(version, project)

    if added is None:
        print_warning(f"Project '{project}' already exists for Python version {version}")
    else:
        print_success(f"Project '{project}' added to Python version {version}")
