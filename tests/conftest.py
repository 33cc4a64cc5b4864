"""Shared test fixtures for the runconfig test suite."""

import pytest
import os

# Add parent directory to path so we can import runconfig modules
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from runconfig.core import Module, ModuleConfig, ModuleRegistry, Project
from runconfig.db import init_db, close_db


@pytest.fixture
def project():
    """Project with two modules with a toolchain, one without, and one unloaded."""
    registry = ModuleRegistry()
    registry.register(Module("app", ModuleConfig(toolchain="python-3.12", dependencies=["core"])))
    registry.register(Module("core", ModuleConfig(toolchain="python-3.12")))
    registry.register(Module("scripts", ModuleConfig(dependencies=["core"])))
    registry.register(Module("legacy", ModuleConfig(toolchain="python-2.7")))
    registry.unload_module("legacy")
    return Project("demo", registry)


@pytest.fixture
def empty_project():
    """Project without modules."""
    return Project("empty")


@pytest.fixture
def test_db(tmp_path):
    """Create a temporary test database."""
    db_path = str(tmp_path / "run_configurations.db")
    init_db(db_path)

    yield db_path

    close_db()


@pytest.fixture
def project_file(tmp_path):
    """Write a project declaration and return its path."""
    path = tmp_path / "project.yaml"
    path.write_text(
        "project: demo\n"
        "modules:\n"
        "  app:\n"
        "    toolchain: python-3.12\n"
        "    dependencies: [core]\n"
        "  core:\n"
        "    toolchain: python-3.12\n"
        "  scripts:\n"
        "    dependencies: [core]\n"
        "  legacy:\n"
        "    toolchain: python-2.7\n"
        "    unloaded: true\n"
    )
    return path
