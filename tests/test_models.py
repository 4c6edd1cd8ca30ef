"""
Tests para los modelos del registro de proyectos.
"""

import pytest
from pydantic import ValidationError

from pymanager.models import LogRow, Project, ProjectLog, current_timestamp


class TestProject:
    """Tests para el modelo Project."""

    def test_new_uses_same_timestamp(self):
        """Project.new asigna created_at == last_accessed."""
        project = Project.new("myapp", now=1700000000)

        assert project.name == "myapp"
        assert project.created_at == 1700000000
        assert project.last_accessed == 1700000000

    def test_new_defaults_to_now(self):
        """Sin timestamp explícito se usa el reloj actual."""
        before = current_timestamp()
        project = Project.new("myapp")
        after = current_timestamp()

        assert before <= project.created_at <= after
        assert project.created_at == project.last_accessed

    def test_negative_timestamp_rejected(self):
        """Los timestamps son enteros no negativos."""
        with pytest.raises(ValidationError):
            Project(name="x", created_at=-1, last_accessed=0)


class TestProjectLog:
    """Tests para el modelo ProjectLog."""

    def test_empty_log(self):
        """Un registro nuevo no tiene proyectos."""
        log = ProjectLog(version="3.11")

        assert log.version == "3.11"
        assert log.projects == []
        assert log.n_projects == 0

    def test_add_and_get_project(self):
        """Los proyectos se agregan al final y se buscan por nombre exacto."""
        log = ProjectLog(version="3.11")
        log.add_project(Project.new("a", now=1))
        log.add_project(Project.new("b", now=2))

        assert [p.name for p in log.projects] == ["a", "b"]
        assert log.get_project("b").created_at == 2
        assert log.get_project("B") is None
        assert log.has_project("a")
        assert not log.has_project("c")

    def test_extra_fields_ignored(self):
        """Campos desconocidos en el documento no son un error."""
        log = ProjectLog.model_validate({"version": "3.9", "projects": [], "extra": 1})

        assert log.version == "3.9"

    def test_missing_version_rejected(self):
        """El campo version es obligatorio."""
        with pytest.raises(ValidationError):
            ProjectLog.model_validate({"projects": []})


class TestLogRow:
    """Tests para LogRow."""

    def test_row(self):
        row = LogRow(version="3.12", project=Project.new("svc", now=5))

        assert row.version == "3.12"
        assert row.project.name == "svc"
