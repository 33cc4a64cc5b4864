"""Tests for storing run configurations in the database."""

from runconfig.execution import RunConfiguration
from runconfig.services import RunConfigurationService


class TestRunConfigurationService:
    """Test save/load/list/delete of run configurations."""

    def test_create_and_load(self, test_db, project):
        service = RunConfigurationService(project)

        service.create("Run core", "core")
        loaded = service.load("Run core")

        assert loaded.name == "Run core"
        assert loaded.module_name == "core"
        assert loaded.get_modules() == [project.registry.find_by_name("core")]

    def test_create_defaults_to_first_module(self, test_db, project):
        service = RunConfigurationService(project)

        configuration = service.create("Run")

        assert configuration.module_name == "app"

    def test_create_refuses_existing_name(self, test_db, project):
        """Creating under a taken name leaves the stored configuration alone."""
        service = RunConfigurationService(project)
        service.create("Run", "core")

        assert service.create("Run", "app") is None
        assert service.load("Run").module_name == "core"
        assert len(service.list_all()) == 1

    def test_exists(self, test_db, project):
        service = RunConfigurationService(project)
        service.create("Run", "core")

        assert service.exists("Run")
        assert not service.exists("Other")

    def test_load_missing(self, test_db, project):
        assert RunConfigurationService(project).load("nope") is None

    def test_save_updates_existing(self, test_db, project):
        service = RunConfigurationService(project)
        configuration = service.create("Run", "app")

        configuration.configuration_module.set_module_name("scripts")
        service.save(configuration)

        records = service.list_all()
        assert len(records) == 1
        assert records[0]["module_name"] == "scripts"

    def test_set_module(self, test_db, project):
        service = RunConfigurationService(project)
        service.create("Run", "app")

        service.set_module("Run", "core")

        assert service.load("Run").module_name == "core"
        assert service.set_module("nope", "core") is None

    def test_delete(self, test_db, project):
        service = RunConfigurationService(project)
        service.create("Run", "app")

        assert service.delete("Run") is True
        assert service.delete("Run") is False
        assert service.list_all() == []

    def test_list_is_scoped_to_project(self, test_db, project, empty_project):
        RunConfigurationService(project).create("Run", "app")
        RunConfigurationService(empty_project).save(RunConfiguration("Other", empty_project))

        assert [r["name"] for r in RunConfigurationService(project).list_all()] == ["Run"]

    def test_validate_all(self, test_db, project):
        service = RunConfigurationService(project)
        service.create("A ok", "app")
        service.create("B warning", "scripts")
        service.create("C unloaded", "legacy")
        service.create("D unknown", "gone")

        results = {r["name"]: r for r in service.validate_all()}

        assert results["A ok"]["severity"] == "ok"
        assert results["B warning"]["severity"] == "warning"
        assert results["C unloaded"]["message"] == "Module 'legacy' is unloaded from project"
        assert results["D unknown"]["message"] == "Module 'gone' doesn't exist in project"

    def test_stored_state_survives_module_unload(self, test_db, project):
        """The stored name stays put while the project changes underneath it."""
        service = RunConfigurationService(project)
        service.create("Run", "core")

        project.registry.unload_module("core")
        loaded = service.load("Run")

        assert loaded.module_name == "core"
        assert loaded.validate().message == "Module 'core' is unloaded from project"
