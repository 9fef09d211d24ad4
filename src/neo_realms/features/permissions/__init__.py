"""Permissions feature: wildcard permission expressions and matching."""

from .entities import PermissionExpression, parse_permission
from .services import PermissionLike, WildcardPermissionMatcher, create_wildcard_matcher

__all__ = [
    "PermissionExpression",
    "parse_permission",
    "PermissionLike",
    "WildcardPermissionMatcher",
    "create_wildcard_matcher",
]
