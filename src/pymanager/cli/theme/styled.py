"""
Funciones para crear objetos Text estilizados (no imprimen directamente).

Se usa Text en lugar de markup para que nombres de proyecto con
corchetes se muestren literalmente.
"""

from rich.text import Text

from pymanager.cli.theme.palette import get_palette


def styled_title(text: str) -> Text:
    """Crea un título estilizado."""
    p = get_palette()
    return Text(text, style=f"bold {p.primary}")


def styled_success(text: str) -> Text:
    """Texto de éxito."""
    p = get_palette()
    return Text(text, style=p.success)


def styled_warning(text: str) -> Text:
    """Texto de advertencia."""
    p = get_palette()
    return Text(text, style=p.warning)


def styled_muted(text: str) -> Text:
    """Texto atenuado."""
    p = get_palette()
    return Text(text, style=p.muted)


def styled_version(version: str) -> Text:
    p = get_palette()
    return Text(version, style=f"bold {p.accent}")


def styled_project_line(name: str, created_at: int, last_accessed: int) -> Text:
    """Línea de listado: '<name> (created at <ts>, last accessed at <ts>)'."""
    p = get_palette()
    text = Text()
    text.append(name, style=f"bold {p.info}")
    text.append(" (created at ")
    text.append(str(created_at), style=p.number)
    text.append(", last accessed at ")
    text.append(str(last_accessed), style=p.number)
    text.append(")")
    return text
