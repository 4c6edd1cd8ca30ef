"""
Descubrimiento de versiones de Python instaladas.

Recorre las entradas directas de los directorios configurados y extrae
la versión `major.minor` de los nombres con formato python<major>.<minor>.
"""

import os
import re
from pathlib import Path
from typing import Iterable, Optional

from pymanager.config import get_settings
from pymanager.logger import get_logger

logger = get_logger(__name__)

PYTHON_PREFIX = "python"
VERSION_PATTERN = re.compile(r"python(\d+)\.(\d+)")


def parse_version(file_name: str) -> Optional[str]:
    """
    Extrae la versión de un nombre de ejecutable.

    Examples:
        python3.11 -> "3.11"
        python3.10.1 -> "3.10"
        python3.12-config -> "3.12"
        python3, pythonX, pip3.11 -> None
    """
    if not file_name.startswith(PYTHON_PREFIX):
        return None
    match = VERSION_PATTERN.match(file_name)
    if match is None:
        return None
    return f"{match.group(1)}.{match.group(2)}"


def _list_entries(directory: Path) -> list[str]:
    """Nombres de las entradas de un directorio; vacío si no se puede leer."""
    try:
        return sorted(os.listdir(directory))
    except OSError as exc:
        logger.debug("Directorio omitido %s: %s", directory, exc)
        return []


def discover_versions(directories: Optional[Iterable[Path]] = None) -> list[str]:
    """
    Descubre las versiones de Python disponibles.

    Args:
        directories: Directorios a recorrer. Default: Settings.scan_dirs

    Returns:
        Versiones sin duplicados, en orden de primera aparición
    """
    if directories is None:
        directories = get_settings().scan_dirs

    versions: list[str] = []
    for directory in directories:
        for name in _list_entries(Path(directory)):
            version = parse_version(name)
            if version is not None and version not in versions:
                versions.append(version)

    logger.debug("Versiones encontradas: %s", versions)
    return versions
