"""Services for run configuration management."""

from .run_configurations import RunConfigurationService

__all__ = ["RunConfigurationService"]
