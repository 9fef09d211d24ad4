"""Permission services."""

from .permission_matcher import (
    PermissionLike,
    WildcardPermissionMatcher,
    create_wildcard_matcher,
)

__all__ = ["PermissionLike", "WildcardPermissionMatcher", "create_wildcard_matcher"]
