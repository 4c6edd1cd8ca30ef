"""
Almacenamiento de registros de proyectos.

Un documento JSON por versión en <log_dir>/<version>.json. No hay cache
ni bloqueo: cada operación lee o escribe directamente el disco, y los
errores de lectura, validación o escritura se propagan sin recuperación.
"""

import json
from pathlib import Path
from typing import Iterable, Optional

from pymanager.config import get_settings
from pymanager.logger import get_logger
from pymanager.models import LogRow, Project, ProjectLog

logger = get_logger(__name__)


class ProjectLogStore:
    """Gestiona los registros de proyectos por versión de Python."""

    def __init__(self, log_dir: Optional[Path] = None):
        """
        Inicializa el almacén.

        Args:
            log_dir: Directorio de los registros.
                     Default: Settings.log_dir (/var/log/pymanager)

        El directorio no se crea aquí, solo al guardar.
        """
        if log_dir is None:
            log_dir = get_settings().log_dir

        self.log_dir = Path(log_dir)

    def path_for(self, version: str) -> Path:
        """Retorna la ruta del registro de una versión."""
        return self.log_dir / f"{version}.json"

    def load(self, version: str) -> ProjectLog:
        """
        Carga el registro de una versión.

        Si el archivo no existe retorna un registro vacío sin tocar el disco.

        Raises:
            pydantic.ValidationError: JSON mal formado o esquema inválido
            OSError: el archivo existe pero no se puede leer
        """
        path = self.path_for(version)

        if not path.exists():
            logger.debug("Sin registro para %s (%s)", version, path)
            return ProjectLog(version=version)

        with open(path, "r", encoding="utf-8") as f:
            data = f.read()

        log = ProjectLog.model_validate_json(data)
        logger.debug("Cargado %s: %d proyectos", path, log.n_projects)
        return log

    def save(self, log: ProjectLog) -> Path:
        """Guarda un registro a disco, sobrescribiendo el anterior."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(log.version)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(log.model_dump(), f, indent=2, ensure_ascii=False)

        logger.debug("Guardado %s: %d proyectos", path, log.n_projects)
        return path

    def add_project(
        self,
        version: str,
        name: str,
        now: Optional[int] = None,
    ) -> Optional[Project]:
        """
        Agrega un proyecto al registro de una versión.

        Un proyecto existente no se modifica (tampoco su last_accessed).

        Args:
            version: Versión de Python
            name: Nombre del proyecto
            now: Timestamp a usar (default: reloj actual)

        Returns:
            Project agregado, o None si ya existía
        """
        log = self.load(version)

        if log.has_project(name):
            return None

        project = log.add_project(Project.new(name, now))
        self.save(log)
        return project

    def collect_rows(self, versions: Iterable[str]) -> list[LogRow]:
        """Aplana los registros de varias versiones en filas (versión, proyecto)."""
        rows = []
        for version in versions:
            log = self.load(version)
            for project in log.projects:
                rows.append(LogRow(version=version, project=project))
        return rows
