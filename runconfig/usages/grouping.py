"""Grouping rule for late bound (dynamically typed) usages."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class Usage:
    """A single found usage."""


class Element:
    """A language construct a usage can point at."""


class ReferenceExpression(Element):
    """A reference resolved at runtime; ``resolve()`` returns its target or None."""

    def __init__(self, name: str, resolver: Callable[[], Any] = None):
        self.name = name
        self._resolver = resolver

    def resolve(self) -> Optional[Any]:
        if self._resolver is None:
            return None
        return self._resolver()

    def __repr__(self):
        return f"<ReferenceExpression: {self.name}>"


class ElementUsage(Usage):
    """A usage backed by a language element."""

    def __init__(self, element: Element):
        self.element = element

    def get_element(self) -> Element:
        return self.element


class UsageGroup(ABC):
    """A named bucket usages are sorted into."""

    @abstractmethod
    def get_text(self, view=None) -> str:
        pass

    def get_icon(self, is_open: bool = False):
        return None

    def get_file_status(self):
        return None

    def is_valid(self) -> bool:
        return True

    def update(self):
        pass

    def navigate(self, request_focus: bool = False):
        pass

    def can_navigate(self) -> bool:
        return False

    def can_navigate_to_source(self) -> bool:
        return False

    def __eq__(self, other):
        return isinstance(other, UsageGroup) and self.get_text() == other.get_text()

    def __lt__(self, other: "UsageGroup"):
        return self.get_text() < other.get_text()

    def __hash__(self):
        return hash(self.get_text())


class LateBoundGroup(UsageGroup):
    TEXT = "Dynamically typed usages"

    def get_text(self, view=None) -> str:
        return self.TEXT

    def __repr__(self):
        return f"<LateBoundGroup: {self.TEXT}>"


class LateBoundUsageGroupingRule:
    """Puts usages whose reference expression does not resolve into one group."""

    def group_usage(self, usage: Usage) -> Optional[UsageGroup]:
        if isinstance(usage, ElementUsage):
            element = usage.get_element()
            if isinstance(element, ReferenceExpression) and element.resolve() is None:
                return LateBoundGroup()
        return None
