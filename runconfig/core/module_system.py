"""Project model: modules, the module registry and the owning project."""

import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class ModuleConfig:
    """Configuration for a module."""
    toolchain: Optional[str] = None  # SDK / runtime the module builds against
    dependencies: List[str] = field(default_factory=list)
    config: Dict[str, Any] = field(default_factory=dict)


@dataclass
class UnloadedModuleDescription:
    """Record kept for a module that was unloaded but is still known by name."""
    name: str
    dependencies: List[str] = field(default_factory=list)


class Module:
    """A named, independently configurable unit inside a project."""

    def __init__(self, name: str, config: ModuleConfig = None):
        """
        Initialize the module.

        Args:
            name: Module name (unique within a project)
            config: Module configuration
        """
        self._name = name
        self.config = config or ModuleConfig()
        self._disposed = False

    @property
    def name(self) -> str:
        """Module name (unique identifier)."""
        return self._name

    @property
    def toolchain(self) -> Optional[str]:
        """Toolchain configured for this module, if any."""
        return self.config.toolchain

    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self):
        """Mark the module as disposed. References to it become stale."""
        if not self._disposed:
            self._disposed = True
            logger.info(f"Disposed module: {self._name}")

    def __repr__(self):
        return f"<Module: {self._name} (toolchain={self.toolchain}, disposed={self._disposed})>"


class ModuleRegistry:
    """Registry of the modules loaded in a project."""

    def __init__(self):
        self._modules: Dict[str, Module] = {}
        self._unloaded: Dict[str, UnloadedModuleDescription] = {}

    def register(self, module: Module):
        """
        Register a module.

        Args:
            module: Module instance to register
        """
        if module.name in self._modules:
            logger.warning(f"Module {module.name} already registered, replacing")

        self._modules[module.name] = module
        self._unloaded.pop(module.name, None)
        logger.info(f"Registered module: {module.name}")

    def unregister(self, module_name: str):
        """Remove a module from the project entirely and dispose it."""
        if module_name in self._modules:
            module = self._modules.pop(module_name)
            module.dispose()
            logger.info(f"Unregistered module: {module_name}")

    def unload_module(self, module_name: str) -> Optional[UnloadedModuleDescription]:
        """
        Unload a module, keeping a descriptor so it is still known by name.

        Args:
            module_name: Name of the module to unload

        Returns:
            The descriptor, or None if no such module is loaded
        """
        module = self._modules.pop(module_name, None)
        if module is None:
            logger.warning(f"Cannot unload unknown module: {module_name}")
            return None

        module.dispose()
        description = UnloadedModuleDescription(
            name=module_name,
            dependencies=list(module.config.dependencies),
        )
        self._unloaded[module_name] = description
        logger.info(f"Unloaded module: {module_name}")
        return description

    def load_module(self, module_name: str, config: ModuleConfig = None) -> Module:
        """
        Load a previously unloaded module back into the project.

        Args:
            module_name: Name of the module to load
            config: Configuration for the new module instance

        Returns:
            The newly registered module
        """
        description = self._unloaded.get(module_name)
        if config is None:
            config = ModuleConfig(dependencies=list(description.dependencies) if description else [])

        module = Module(module_name, config)
        self.register(module)
        return module

    def list_modules(self) -> List[Module]:
        """Get all loaded modules in registration order."""
        return list(self._modules.values())

    def find_by_name(self, module_name: str) -> Optional[Module]:
        """Get a loaded module by name."""
        return self._modules.get(module_name)

    def find_unloaded_descriptor(self, module_name: str) -> Optional[UnloadedModuleDescription]:
        """Get the descriptor of an unloaded module by name."""
        return self._unloaded.get(module_name)

    def dispose_all(self):
        """Dispose every loaded module."""
        for module in self._modules.values():
            module.dispose()

    def get_module_info(self) -> List[Dict[str, Any]]:
        """Get information about all known modules."""
        info = [
            {
                "name": m.name,
                "toolchain": m.toolchain,
                "dependencies": list(m.config.dependencies),
                "loaded": True,
            }
            for m in self._modules.values()
        ]
        info.extend(
            {
                "name": d.name,
                "toolchain": None,
                "dependencies": list(d.dependencies),
                "loaded": False,
            }
            for d in self._unloaded.values()
        )
        return info

    def __len__(self):
        return len(self._modules)


class Project:
    """Top-level container owning a module registry and the disposal lifecycle."""

    def __init__(self, name: str, registry: ModuleRegistry = None):
        self.name = name
        self.registry = registry if registry is not None else ModuleRegistry()
        self._disposed = False

    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self):
        """Dispose the project and every module it holds."""
        if self._disposed:
            return
        self.registry.dispose_all()
        self._disposed = True
        logger.info(f"Disposed project: {self.name}")

    def __repr__(self):
        return f"<Project: {self.name} ({len(self.registry)} modules, disposed={self._disposed})>"
