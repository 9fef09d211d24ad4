"""Grant set and realm snapshot domain entities."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from ...permissions.entities import PermissionExpression, parse_permission
from .account import Account


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class PrincipalGrants:
    """Roles and resolved permission expressions of a single principal."""

    roles: FrozenSet[str] = frozenset()
    permissions: Tuple[PermissionExpression, ...] = ()


@dataclass(frozen=True)
class GrantSet:
    """Immutable mapping of principal to granted roles and permissions."""

    grants: Mapping[str, PrincipalGrants] = field(default_factory=_empty_mapping)

    @classmethod
    def build(
        cls,
        user_roles: Mapping[str, Iterable[str]],
        role_permissions: Optional[Mapping[str, Iterable[str]]] = None,
        direct_permissions: Optional[Mapping[str, Iterable[str]]] = None,
    ) -> "GrantSet":
        """Resolve role permissions into per-principal grants.

        Args:
            user_roles: principal -> role names
            role_permissions: role name -> permission strings
            direct_permissions: principal -> permission strings granted without a role

        Returns:
            A read-only grant set. Roles without a permission entry grant nothing.
        """
        role_permissions = role_permissions or {}
        direct_permissions = direct_permissions or {}

        principals = set(user_roles) | set(direct_permissions)
        grants: Dict[str, PrincipalGrants] = {}
        for principal in principals:
            roles = frozenset(user_roles.get(principal, ()))
            permission_strings: List[str] = list(direct_permissions.get(principal, ()))
            for role in sorted(roles):
                permission_strings.extend(role_permissions.get(role, ()))

            # Keep first occurrence order, drop duplicates
            expressions = tuple(
                dict.fromkeys(parse_permission(p) for p in permission_strings)
            )
            grants[principal] = PrincipalGrants(roles=roles, permissions=expressions)

        return cls(grants=MappingProxyType(grants))

    def get(self, principal: str) -> Optional[PrincipalGrants]:
        """Get grants for a principal, or None when unknown."""
        return self.grants.get(principal)

    def __contains__(self, principal: object) -> bool:
        return principal in self.grants

    def __len__(self) -> int:
        return len(self.grants)


@dataclass(frozen=True)
class RealmSnapshot:
    """Everything a realm reads on its request path, published as one unit."""

    grant_set: GrantSet
    accounts: Mapping[str, Account] = field(default_factory=_empty_mapping)

    @classmethod
    def from_accounts(
        cls,
        accounts: Iterable[Account],
        role_permissions: Optional[Mapping[str, Iterable[str]]] = None,
    ) -> "RealmSnapshot":
        """Build a snapshot whose grant set is derived from the given accounts."""
        by_principal = {account.principal: account for account in accounts}
        grant_set = GrantSet.build(
            user_roles={name: account.roles for name, account in by_principal.items()},
            role_permissions=role_permissions,
            direct_permissions={
                name: account.permissions
                for name, account in by_principal.items()
                if account.permissions
            },
        )
        return cls(grant_set=grant_set, accounts=MappingProxyType(by_principal))
