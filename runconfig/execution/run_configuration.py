"""Run configurations bound to a project module."""

import logging
from typing import List
from xml.etree import ElementTree
from xml.etree.ElementTree import Element

from runconfig.core.module_system import Module, Project
from runconfig.execution.errors import RuntimeConfigurationError, Severity, ValidationResult
from runconfig.execution.module_reference import ModuleReference

logger = logging.getLogger(__name__)

ELEMENT = "configuration"
NAME_ATTRIBUTE = "name"


class RunConfiguration:
    """A named set of execution parameters targeting one module."""

    def __init__(self, name: str, project: Project, log: logging.Logger = None):
        """
        Initialize the run configuration.

        Args:
            name: Configuration name
            project: Project the configuration belongs to
            log: Logger for persistence diagnostics
        """
        self.name = name
        self.project = project
        self._log = log or logger
        self.configuration_module = ModuleReference(project, self._log)

    @classmethod
    def create(cls, name: str, project: Project, log: logging.Logger = None) -> "RunConfiguration":
        """Create a configuration bound to the project's first module, if any."""
        configuration = cls(name, project, log)
        configuration.configuration_module.init()
        logger.info(f"Created run configuration {name} -> {configuration.module_name or '<none>'}")
        return configuration

    @property
    def module_name(self) -> str:
        return self.configuration_module.get_module_name()

    def get_modules(self) -> List[Module]:
        """Modules this configuration runs against."""
        module = self.configuration_module.get_module()
        return [module] if module is not None else []

    def validate(self) -> ValidationResult:
        return self.configuration_module.validate()

    def can_run(self) -> bool:
        """False when the configuration has an error that blocks execution."""
        return self.validate().severity is not Severity.ERROR

    def check_configuration(self):
        """
        Check the configuration before running.

        Raises:
            RuntimeConfigurationWarning: The module has no toolchain
            RuntimeConfigurationError: The module cannot be used
        """
        self.configuration_module.check_for_warning()

    def check_runnable(self) -> ValidationResult:
        """
        Check that the configuration can run, tolerating warnings.

        Returns:
            The validation result (OK or warning)

        Raises:
            RuntimeConfigurationError: The module cannot be used
        """
        result = self.validate()
        if result.is_error:
            logger.warning(f"Run configuration {self.name} cannot run: {result.message}")
            raise RuntimeConfigurationError(result.message)
        return result

    def read_external(self, element: Element) -> List[str]:
        """Restore the configuration from its ``configuration`` element."""
        name = element.get(NAME_ATTRIBUTE)
        if name:
            self.name = name
        return self.configuration_module.read_external(element)

    def write_external(self, element: Element):
        element.set(NAME_ATTRIBUTE, self.name)
        self.configuration_module.write_external(element)

    def to_xml(self) -> str:
        """Serialize the configuration to an XML string."""
        element = Element(ELEMENT)
        self.write_external(element)
        return ElementTree.tostring(element, encoding="unicode")

    @classmethod
    def from_xml(cls, text: str, project: Project, log: logging.Logger = None) -> "RunConfiguration":
        """
        Deserialize a configuration from an XML string.

        Raises:
            ValueError: The text is not a ``configuration`` element
        """
        try:
            element = ElementTree.fromstring(text)
        except ElementTree.ParseError as e:
            raise ValueError(f"Invalid run configuration XML: {e}") from e

        if element.tag != ELEMENT:
            raise ValueError(f"Expected <{ELEMENT}> element, got <{element.tag}>")

        configuration = cls(element.get(NAME_ATTRIBUTE) or "", project, log)
        configuration.read_external(element)
        return configuration

    def __repr__(self):
        return f"<RunConfiguration: {self.name} (module={self.module_name or '<none>'})>"
