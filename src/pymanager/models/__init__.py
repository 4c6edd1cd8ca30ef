"""
Modelos de datos para pymanager.

Este módulo contiene los modelos Pydantic utilizados en la aplicación.
"""

from pymanager.models.base import current_timestamp
from pymanager.models.project import LogRow, Project, ProjectLog

__all__ = [
    "current_timestamp",
    "Project",
    "ProjectLog",
    "LogRow",
]
