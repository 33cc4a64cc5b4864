"""Run configurations and their module binding."""

from .errors import (
    Severity,
    ValidationResult,
    RuntimeConfigurationException,
    RuntimeConfigurationWarning,
    RuntimeConfigurationError,
)
from .module_reference import ModuleReference
from .run_configuration import RunConfiguration

__all__ = [
    "Severity",
    "ValidationResult",
    "RuntimeConfigurationException",
    "RuntimeConfigurationWarning",
    "RuntimeConfigurationError",
    "ModuleReference",
    "RunConfiguration",
]
