"""Core project model."""

from .module_system import Module, ModuleConfig, ModuleRegistry, Project, UnloadedModuleDescription
from .module_loader import ProjectLoader

__all__ = ["Module", "ModuleConfig", "ModuleRegistry", "Project", "UnloadedModuleDescription", "ProjectLoader"]
