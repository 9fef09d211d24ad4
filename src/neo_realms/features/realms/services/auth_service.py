"""Host-facing authentication service over a realm.

Wraps the principal returned by ``login`` into an ``AuthenticatedUser`` bound
to the realm that authenticated it, so request handlers can check grants
without threading the realm through every call.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from ....core.exceptions import AuthorizationError, PermissionDeniedError
from ..entities import AuthRealm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedUser:
    """A principal bound to the realm that authenticated it."""

    principal: str
    realm: AuthRealm

    def has_role(self, role: str) -> bool:
        return self.realm.has_role(self.principal, role)

    def is_authorised(self, permission: str) -> bool:
        return self.realm.has_permission(self.principal, permission)

    def is_authorised_all(self, permissions: Iterable[str]) -> bool:
        return all(self.is_authorised(permission) for permission in permissions)

    def is_authorised_any(self, permissions: Iterable[str]) -> bool:
        return any(self.is_authorised(permission) for permission in permissions)

    def require_role(self, role: str) -> None:
        """Raise AuthorizationError unless the principal has ``role``."""
        if not self.has_role(role):
            raise AuthorizationError(
                f"Role required: {role}", principal=self.principal, role=role
            )

    def require_permission(self, permission: str) -> None:
        """Raise PermissionDeniedError unless the principal holds ``permission``."""
        if not self.is_authorised(permission):
            raise PermissionDeniedError(
                f"Permission required: {permission}",
                principal=self.principal,
                permission=permission,
            )


class RealmAuthService:
    """Authenticates credentials against a realm and returns bound users."""

    def __init__(self, realm: AuthRealm):
        self.realm = realm

    async def authenticate(self, credentials: Mapping[str, Any]) -> AuthenticatedUser:
        """Authenticate credentials.

        Raises:
            AuthenticationError: If the realm rejects the credentials
            BackingStoreError: If the realm cannot reach its store
        """
        principal = await self.realm.login(credentials)
        logger.info(f"Authenticated '{principal}' via realm '{self.realm.name}'")
        return AuthenticatedUser(principal=principal, realm=self.realm)

    def user_for(self, principal: str) -> AuthenticatedUser:
        """Bind an already-authenticated principal (e.g. from a session) to the realm."""
        return AuthenticatedUser(principal=principal, realm=self.realm)
