"""Module reference held by a run configuration."""

import logging
from typing import List, Optional
from xml.etree.ElementTree import Element, SubElement

from runconfig.core.module_system import Module, Project
from runconfig.execution import messages
from runconfig.execution.errors import ValidationResult

logger = logging.getLogger(__name__)

ELEMENT = "module"
ATTRIBUTE = "name"


def _normalize(module_name: Optional[str]) -> Optional[str]:
    if module_name is None or not module_name.strip():
        return None
    return module_name


class ModuleReference:
    """
    Name-addressed pointer from a run configuration to a project module.

    The module name is the persisted identity. The module object is only a
    cached lookup result: it is looked up again on every read while a name
    is set, and dropped when it turns out to be disposed.
    """

    def __init__(self, project: Project, log: logging.Logger = None):
        """
        Initialize the reference.

        Args:
            project: Project owning the run configuration
            log: Logger receiving persistence diagnostics (defaults to this module's logger)
        """
        if project is None:
            raise ValueError("ModuleReference requires a project")
        self._project = project
        self._module: Optional[Module] = None
        self._module_name: Optional[str] = None
        self._log = log or logger

    @property
    def project(self) -> Project:
        return self._project

    def init(self):
        """Bind to the first module of the project when no module is set yet."""
        if not self.get_module_name().strip():
            modules = self._project.registry.list_modules()
            if modules:
                self.set_module(modules[0])

    def get_module(self) -> Optional[Module]:
        """
        Resolve the referenced module.

        Returns:
            The live module, or None if no name is set, the project is
            disposed, or nothing is registered under the name
        """
        if self._module_name is not None:
            self._module = self.find_module(self._module_name)
        if self._module is not None and self._module.is_disposed():
            self._module = None
        return self._module

    resolve = get_module

    def find_module(self, module_name: str) -> Optional[Module]:
        """Look up a module by name in the project registry."""
        if self._project.is_disposed():
            return None
        return self._project.registry.find_by_name(module_name)

    def set_module(self, module: Optional[Module]):
        """Point at a module object directly; the name follows the module."""
        module_name = _normalize(module.name) if module is not None else None
        # a module without a usable name counts as no module
        self._module = module if module_name is not None else None
        self._module_name = module_name

    def set_module_name(self, module_name: Optional[str]):
        """Point at a module by name, dropping the cached object if the name changed."""
        module_name = _normalize(module_name)
        if self._module_name != module_name:
            self._module_name = module_name
            self._module = None

    def get_module_name(self) -> str:
        return self._module_name or ""

    def validate(self) -> ValidationResult:
        """
        Classify the current binding.

        Returns:
            OK, a warning when the module has no toolchain, or an error when
            the module is not specified, unloaded or unknown
        """
        module = self.get_module()
        if module is not None:
            if module.toolchain is None:
                return ValidationResult.warning(
                    messages.message(messages.NO_TOOLCHAIN_FOR_MODULE, module.name)
                )
            return ValidationResult.ok()

        if self._module_name is not None:
            registry = self._project.registry
            if registry.find_unloaded_descriptor(self._module_name) is not None:
                return ValidationResult.error(
                    messages.message(messages.MODULE_UNLOADED, self._module_name)
                )
            return ValidationResult.error(
                messages.message(messages.MODULE_DOES_NOT_EXIST, self._module_name)
            )

        return ValidationResult.error(messages.MODULE_NOT_SPECIFIED)

    def check_for_warning(self):
        """
        Validate and raise on anything that is not OK.

        Raises:
            RuntimeConfigurationWarning: Module resolves but lacks a toolchain
            RuntimeConfigurationError: Module is not specified, unloaded or unknown
        """
        self.validate().raise_for_severity()

    def read_external(self, element: Element) -> List[str]:
        """
        Read the module name from the ``module`` child of ``element``.

        A blank or missing name leaves the current name untouched.

        Returns:
            Diagnostics produced while reading
        """
        diagnostics = []
        modules = element.findall(ELEMENT)
        if modules:
            if len(modules) > 1:
                diagnostics.append(messages.DUPLICATE_MODULE_ELEMENT)
                self._log.warning(messages.DUPLICATE_MODULE_ELEMENT)
            # a stored name is never replaced by an empty one
            module_name = _normalize(modules[0].get(ATTRIBUTE))
            if module_name is not None:
                self.set_module_name(module_name)
        return diagnostics

    def write_external(self, parent: Element):
        """Write the module name into the ``module`` child of ``parent``, creating it if needed."""
        prev = parent.find(ELEMENT)
        if prev is None:
            prev = SubElement(parent, ELEMENT)
        prev.set(ATTRIBUTE, self.get_module_name())

    def __repr__(self):
        return f"<ModuleReference: {self.get_module_name() or '<none>'} in {self._project.name}>"
