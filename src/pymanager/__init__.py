"""
pymanager - Registro de proyectos por versión de Python.

Descubre los intérpretes instalados en el sistema y lleva un registro
JSON de los proyectos trabajados con cada versión.
"""

__version__ = "0.1.0"
