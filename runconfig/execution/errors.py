"""Validation results and run configuration exceptions."""

import enum
from dataclasses import dataclass


class Severity(enum.Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a run configuration binding."""
    severity: Severity
    message: str = ""

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(Severity.OK)

    @classmethod
    def warning(cls, message: str) -> "ValidationResult":
        return cls(Severity.WARNING, message)

    @classmethod
    def error(cls, message: str) -> "ValidationResult":
        return cls(Severity.ERROR, message)

    @property
    def is_ok(self) -> bool:
        return self.severity is Severity.OK

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def raise_for_severity(self):
        """Raise the exception matching this result. No-op when OK."""
        if self.severity is Severity.WARNING:
            raise RuntimeConfigurationWarning(self.message)
        if self.severity is Severity.ERROR:
            raise RuntimeConfigurationError(self.message)


class RuntimeConfigurationException(Exception):
    """Base class for run configuration problems."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RuntimeConfigurationWarning(RuntimeConfigurationException):
    """The configuration is usable but sub-optimal."""


class RuntimeConfigurationError(RuntimeConfigurationException):
    """The configuration cannot be executed."""
