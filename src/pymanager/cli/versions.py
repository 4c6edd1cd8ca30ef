"""
Comando list-python-versions.
"""

from pymanager.cli.common import print_empty, print_line, print_title, styled_version
from pymanager.scanner import discover_versions


def list_python_versions() -> None:
    """List all Python versions available on the system."""
    versions = discover_versions()

    if not versions:
        print_empty("No Python versions found.")
        return

    print_title("Python versions found:")
    for version in versions:
        print_line(styled_version(version))
