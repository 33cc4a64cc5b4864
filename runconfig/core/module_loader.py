"""Project loader for building a project model from a YAML declaration."""

import logging
import yaml
from pathlib import Path
from typing import Dict, List
from .module_system import Module, ModuleConfig, ModuleRegistry, Project

logger = logging.getLogger(__name__)


class ProjectLoader:
    """Loads a project and its modules from a declaration file.

    The declaration looks like::

        project: demo
        modules:
          app:
            toolchain: python-3.12
            dependencies: [core]
          core:
            toolchain: python-3.12
          legacy:
            unloaded: true
    """

    def __init__(self, config_path: str = "project.yaml"):
        """
        Initialize the project loader.

        Args:
            config_path: Path to the project declaration file
        """
        self.config_path = Path(config_path)
        self.config = {}

    def load_config(self) -> Dict:
        """Load the project declaration from the YAML file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Project declaration not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            self.config = yaml.safe_load(f) or {}

        if not isinstance(self.config, dict):
            raise ValueError(f"Project declaration must be a mapping: {self.config_path}")

        logger.info(f"Loaded project declaration from {self.config_path}")
        return self.config

    def build_project(self, config: Dict) -> Project:
        """
        Build a project from an already parsed declaration.

        Args:
            config: Declaration dict

        Returns:
            Project with its registry populated
        """
        name = config.get('project') or self.config_path.stem
        modules_config = config.get('modules') or {}
        if not isinstance(modules_config, dict):
            raise ValueError(f"'modules' must be a mapping in project {name}")

        registry = ModuleRegistry()
        unloaded: List[str] = []

        for module_name, module_config in modules_config.items():
            module_config = module_config or {}
            if not isinstance(module_config, dict):
                raise ValueError(f"Module {module_name} must be a mapping in project {name}")
            registry.register(Module(
                str(module_name),
                ModuleConfig(
                    toolchain=module_config.get('toolchain'),
                    dependencies=list(module_config.get('dependencies') or []),
                    config=module_config.get('config') or {},
                ),
            ))
            if module_config.get('unloaded', False):
                unloaded.append(str(module_name))

        # Unloading after registration keeps the declared order for loaded modules
        for module_name in unloaded:
            registry.unload_module(module_name)

        logger.info(f"Project {name}: {len(registry)} loaded, {len(unloaded)} unloaded modules")
        return Project(name, registry)

    def load_project(self) -> Project:
        """Load the declaration file and build the project."""
        return self.build_project(self.load_config())
