"""Configuración de pytest para tests de pymanager."""

import logging
import os

import pytest
from rich.logging import RichHandler

from pymanager.cli.theme import CLITheme
from pymanager.config import (
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    ENV_SCAN_DIRS,
    ENV_THEME,
    ThemeName,
)
from pymanager.logger import ROOT_LOGGER


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Aísla cada test de las variables PYMANAGER_* del entorno."""
    for name in (ENV_SCAN_DIRS, ENV_LOG_DIR, ENV_THEME, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)
    yield
    CLITheme.set_theme(ThemeName.DEFAULT)


@pytest.fixture(autouse=True)
def reset_logging():
    """Deja el logger de pymanager sin RichHandler y sin nivel tras cada test."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def scan_dirs(tmp_path):
    """Dos directorios de binarios vacíos (equivalentes a /usr/bin y /usr/local/bin)."""
    usr_bin = tmp_path / "usr" / "bin"
    usr_local_bin = tmp_path / "usr" / "local" / "bin"
    usr_bin.mkdir(parents=True)
    usr_local_bin.mkdir(parents=True)
    return [usr_bin, usr_local_bin]


@pytest.fixture
def log_dir(tmp_path):
    """Directorio de registros (no existe hasta el primer guardado)."""
    return tmp_path / "var" / "log" / "pymanager"


@pytest.fixture
def env(monkeypatch, scan_dirs, log_dir):
    """Apunta la configuración a los directorios temporales."""
    monkeypatch.setenv(ENV_SCAN_DIRS, os.pathsep.join(str(d) for d in scan_dirs))
    monkeypatch.setenv(ENV_LOG_DIR, str(log_dir))
    return {"scan_dirs": scan_dirs, "log_dir": log_dir}


@pytest.fixture
def make_binaries():
    """Crea archivos vacíos con los nombres dados en un directorio."""
    def _make(directory, *names):
        for name in names:
            (directory / name).touch()
    return _make
