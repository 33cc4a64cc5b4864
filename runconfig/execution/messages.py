"""User-facing message templates for run configuration checks."""

NO_TOOLCHAIN_FOR_MODULE = "No toolchain specified for module '{0}'"
MODULE_UNLOADED = "Module '{0}' is unloaded from project"
MODULE_DOES_NOT_EXIST = "Module '{0}' doesn't exist in project"
MODULE_NOT_SPECIFIED = "Module not specified"
DUPLICATE_MODULE_ELEMENT = "Module serialized more than one time"


def message(template: str, *args) -> str:
    """Format a message template with positional arguments."""
    return template.format(*args)
