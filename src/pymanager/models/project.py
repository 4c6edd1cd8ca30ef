"""
Modelos del registro de proyectos.

Cada versión de Python tiene su propio ProjectLog, persistido como un
documento JSON independiente.
"""

from typing import Optional

from pydantic import BaseModel, Field

from pymanager.models.base import current_timestamp


class Project(BaseModel):
    """Proyecto trabajado con una versión de Python."""

    name: str
    created_at: int = Field(..., ge=0, description="Creación (epoch s)")
    last_accessed: int = Field(..., ge=0, description="Último acceso (epoch s)")

    @classmethod
    def new(cls, name: str, now: Optional[int] = None) -> "Project":
        """Crea un proyecto con ambos timestamps iguales al instante actual."""
        if now is None:
            now = current_timestamp()
        return cls(name=name, created_at=now, last_accessed=now)


class ProjectLog(BaseModel):
    """Registro de proyectos de una versión de Python."""

    version: str
    projects: list[Project] = Field(default_factory=list)

    def get_project(self, name: str) -> Optional[Project]:
        """Obtiene un proyecto por nombre exacto."""
        for project in self.projects:
            if project.name == name:
                return project
        return None

    def has_project(self, name: str) -> bool:
        return self.get_project(name) is not None

    def add_project(self, project: Project) -> Project:
        """Agrega un proyecto al final del registro."""
        self.projects.append(project)
        return project

    @property
    def n_projects(self) -> int:
        """Número de proyectos registrados."""
        return len(self.projects)


class LogRow(BaseModel):
    """Fila aplanada (versión, proyecto) para la vista de tabla."""

    version: str
    project: Project
