"""Permite ejecutar `python -m pymanager`."""

from pymanager.cli import app

if __name__ == "__main__":
    app()
