"""Role and resource matching for access decisions."""

from .resource_pattern import ResourcePattern, matches_resource, split_path
from .permission_matcher import PermissionMatcher, create_permission_matcher

__all__ = [
    "ResourcePattern",
    "matches_resource",
    "split_path",
    "PermissionMatcher",
    "create_permission_matcher",
]
