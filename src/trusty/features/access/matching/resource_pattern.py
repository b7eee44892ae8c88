"""
Resource Pattern Matching for Trusty

Path-segment wildcard patterns for hierarchical resource names:

- Literal segments: "orders/42" matches only "orders/42"
- Single-segment wildcard: "orders/*" matches "orders/42" but not "orders/42/items"
- Trailing multi-segment wildcard: "orders/**" matches "orders", "orders/42",
  "orders/42/items", ...
- "**" on its own matches every resource, including the empty path

Evaluation is a single left-to-right pass over the segments.
"""
from dataclasses import dataclass
from typing import List, Tuple

from ....core.exceptions import InvalidPatternError

SEPARATOR = "/"
SINGLE_WILDCARD = "*"
MULTI_WILDCARD = "**"


def split_path(path: str) -> List[str]:
    """
    Split a resource path into segments.

    The empty path has no segments; every other path is split on "/" as is,
    so empty segments ("a//b", "a/") are kept and compared literally.
    """
    if path == "":
        return []
    return path.split(SEPARATOR)


@dataclass(frozen=True)
class ResourcePattern:
    """Parsed resource pattern."""

    raw: str
    segments: Tuple[str, ...]
    open_ended: bool

    @classmethod
    def parse(cls, pattern: str) -> "ResourcePattern":
        """
        Parse a resource pattern string.

        Args:
            pattern: Pattern such as "invoices/*" or "tenants/**"

        Returns:
            Parsed pattern

        Raises:
            InvalidPatternError: If "**" appears anywhere but the last segment
        """
        if not isinstance(pattern, str):
            raise InvalidPatternError(repr(pattern), "pattern must be a string")

        segments = split_path(pattern)
        open_ended = bool(segments) and segments[-1] == MULTI_WILDCARD
        fixed = segments[:-1] if open_ended else segments

        if MULTI_WILDCARD in fixed:
            raise InvalidPatternError(pattern, "'**' is only allowed as the final segment")

        return cls(raw=pattern, segments=tuple(fixed), open_ended=open_ended)

    def matches(self, resource: str) -> bool:
        """
        Check if a resource path is matched by this pattern.

        Args:
            resource: Requested resource path

        Returns:
            True if every segment matches and the segment counts agree
            (or the pattern ends in "**" and covers the rest)
        """
        requested = split_path(resource)

        if self.open_ended:
            if len(requested) < len(self.segments):
                return False
        elif len(requested) != len(self.segments):
            return False

        for expected, actual in zip(self.segments, requested):
            if expected != SINGLE_WILDCARD and expected != actual:
                return False

        return True

    def __str__(self) -> str:
        return self.raw


def matches_resource(pattern: str, resource: str) -> bool:
    """Parse pattern and match resource against it."""
    return ResourcePattern.parse(pattern).matches(resource)


__all__ = [
    "ResourcePattern",
    "matches_resource",
    "split_path",
    "SEPARATOR",
    "SINGLE_WILDCARD",
    "MULTI_WILDCARD",
]
