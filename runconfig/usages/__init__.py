"""Find-usages grouping rules."""

from .grouping import (
    Usage,
    Element,
    ElementUsage,
    ReferenceExpression,
    UsageGroup,
    LateBoundGroup,
    LateBoundUsageGroupingRule,
)

__all__ = [
    "Usage",
    "Element",
    "ElementUsage",
    "ReferenceExpression",
    "UsageGroup",
    "LateBoundGroup",
    "LateBoundUsageGroupingRule",
]
