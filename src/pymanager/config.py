"""Configuración de pymanager (directorios, tema y nivel de logging)."""

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


DEFAULT_SCAN_DIRS = (Path("/usr/bin"), Path("/usr/local/bin"))
DEFAULT_LOG_DIR = Path("/var/log/pymanager")

ENV_SCAN_DIRS = "PYMANAGER_SCAN_DIRS"
ENV_LOG_DIR = "PYMANAGER_LOG_DIR"
ENV_THEME = "PYMANAGER_THEME"
ENV_LOG_LEVEL = "PYMANAGER_LOG_LEVEL"


class ThemeName(str, Enum):
    """Temas disponibles para la consola."""
    DEFAULT = "default"
    MONOKAI = "monokai"
    MINIMAL = "minimal"


class LogLevel(str, Enum):
    """Niveles de logging aceptados."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Settings(BaseModel):
    """Configuración efectiva de una invocación."""
    scan_dirs: list[Path] = Field(
        default_factory=lambda: list(DEFAULT_SCAN_DIRS),
        description="Directorios donde buscar ejecutables python<major>.<minor>",
    )
    log_dir: Path = Field(default=DEFAULT_LOG_DIR, description="Directorio de registros JSON")
    theme: ThemeName = Field(default=ThemeName.DEFAULT, description="Tema de colores")
    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Nivel de logging")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


def get_settings() -> Settings:
    """
    Construye la configuración a partir de las variables de entorno.

    Se recalcula en cada llamada; no hay estado global entre invocaciones.

    Variables reconocidas:
        PYMANAGER_SCAN_DIRS: directorios separados por os.pathsep
        PYMANAGER_LOG_DIR: directorio de registros
        PYMANAGER_THEME: default, monokai o minimal
        PYMANAGER_LOG_LEVEL: DEBUG, INFO, WARNING o ERROR
    """
    values = {}

    scan_dirs = os.environ.get(ENV_SCAN_DIRS)
    if scan_dirs:
        values["scan_dirs"] = [Path(d) for d in scan_dirs.split(os.pathsep) if d]

    log_dir = os.environ.get(ENV_LOG_DIR)
    if log_dir:
        values["log_dir"] = Path(log_dir)

    theme = os.environ.get(ENV_THEME)
    if theme:
        values["theme"] = theme.lower()

    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        values["log_level"] = log_level

    return Settings(**values)
