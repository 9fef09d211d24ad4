"""
Wildcard Permission Matcher for neo-realms

Decides whether a granted permission expression implies a requested one.
Matching is positional, left to right:

- a granted position holding ``*`` satisfies any requested position;
- otherwise the two positions must share at least one sub-part;
- a granted expression that runs out first implies everything beyond its
  length (``"newsletter:edit"`` implies ``"newsletter:edit:13"``);
- a granted expression that is longer than the request only implies it
  when every extra position is ``*``.
"""
import logging
from typing import Iterable, Union

from ..entities.permission_expression import PermissionExpression, parse_permission

logger = logging.getLogger(__name__)

PermissionLike = Union[str, PermissionExpression]


def _as_expression(permission: PermissionLike) -> PermissionExpression:
    if isinstance(permission, PermissionExpression):
        return permission
    return parse_permission(permission)


class WildcardPermissionMatcher:
    """Default implementation of wildcard permission matching.

    Supports patterns like:
    - Exact matches: "newsletter:edit:13" implies "newsletter:edit:13"
    - Truncation: "newsletter:edit" implies "newsletter:edit:13:draft"
    - Positional wildcards: "newsletter:*:13" implies "newsletter:delete:13"
    - Sub-part lists: "newsletter:edit,delete" implies "newsletter:delete"
    - Global wildcard: "*" (or "") implies any permission
    """

    def implies(self, granted: PermissionLike, requested: PermissionLike) -> bool:
        """
        Check if a granted permission covers a requested permission.

        Args:
            granted: Permission held by the principal (e.g., "newsletter:*")
            requested: Permission being checked (e.g., "newsletter:edit:13")

        Returns:
            True if the granted permission implies the requested one
        """
        granted_expr = _as_expression(granted)
        requested_expr = _as_expression(requested)

        granted_length = len(granted_expr)
        for index, requested_part in enumerate(requested_expr.parts):
            if index >= granted_length:
                # Granted ran out without a mismatch
                return True
            if granted_expr.part_is_wildcard(index):
                continue
            if granted_expr.parts[index].isdisjoint(requested_part):
                return False

        for index in range(len(requested_expr), granted_length):
            if not granted_expr.part_is_wildcard(index):
                return False
        return True

    def implies_any(
        self,
        granted_permissions: Iterable[PermissionLike],
        requested: PermissionLike,
    ) -> bool:
        """
        Check if any granted permission implies the requested permission.

        Args:
            granted_permissions: Permissions held by the principal
            requested: Permission being checked

        Returns:
            True as soon as one granted permission implies the request
        """
        requested_expr = _as_expression(requested)
        for granted in granted_permissions:
            if self.implies(granted, requested_expr):
                logger.debug(f"Permission match: '{granted}' implies '{requested_expr}'")
                return True
        return False


def create_wildcard_matcher() -> WildcardPermissionMatcher:
    """Create a wildcard matcher instance."""
    return WildcardPermissionMatcher()


__all__ = [
    "PermissionLike",
    "WildcardPermissionMatcher",
    "create_wildcard_matcher",
]
