"""Tests for YAML configuration loading."""

import pytest
from runconfig import config


@pytest.fixture(autouse=True)
def clean_config():
    config.reset_config()
    yield
    config.reset_config()


def test_relative_paths_resolved_against_config_dir(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "database:\n"
        "  path: data/run_configurations.db\n"
        "project:\n"
        "  declaration: project.yaml\n"
    )

    config.load_config(str(path))

    assert config.get("database.path") == str(tmp_path / "data" / "run_configurations.db")
    assert config.get("project.declaration") == str(tmp_path / "project.yaml")


def test_memory_database_left_alone(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("database:\n  path: ':memory:'\n")

    config.load_config(str(path))

    assert config.get("database.path") == ":memory:"


def test_null_paths_left_alone(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("database:\n  path:\nlogging:\n  file:\n")

    config.load_config(str(path))

    assert config.get("database.path") is None
    assert config.get("logging.file") is None


def test_get_default_for_missing_key(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: DEBUG\n")

    config.load_config(str(path))

    assert config.get("logging.level") == "DEBUG"
    assert config.get("logging.file") is None
    assert config.get("api.port", 8000) == 8000


def test_missing_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))

    with pytest.raises(FileNotFoundError):
        config.load_config()
