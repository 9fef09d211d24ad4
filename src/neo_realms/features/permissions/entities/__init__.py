"""Permission entities."""

from .permission_expression import PermissionExpression, parse_permission

__all__ = ["PermissionExpression", "parse_permission"]
