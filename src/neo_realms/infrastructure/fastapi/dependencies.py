"""FastAPI dependency helpers for realm-backed authorization.

The host decides how a request carries its principal (session, token,
header); these helpers only enforce role and permission grants for it.
By default the realm is read from ``request.app.state.realm`` and the
principal from ``request.state.principal``.
"""

from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status

from ...features.realms.entities import AuthRealm

RealmProvider = Callable[..., AuthRealm]
PrincipalProvider = Callable[..., Optional[str]]


def get_realm(request: Request) -> AuthRealm:
    """Get the realm published on application state."""
    realm = getattr(request.app.state, "realm", None)
    if realm is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authorization realm not configured",
        )
    return realm


def get_current_principal(request: Request) -> Optional[str]:
    """Get the principal the host attached to the request, if any."""
    return getattr(request.state, "principal", None)


def require_authentication(principal: Optional[str]) -> str:
    """Raise 401 unless a principal is present."""
    if not principal:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return principal


def require_permission(
    permission: str,
    realm_provider: RealmProvider = get_realm,
    principal_provider: PrincipalProvider = get_current_principal,
):
    """Create a dependency that requires a specific permission.

    Usage:
        @router.put("/newsletters/{item_id}")
        async def edit_newsletter(
            principal: str = Depends(require_permission("newsletter:edit"))
        ):
            ...
    """
    async def _check_permission(
        principal: Optional[str] = Depends(principal_provider),
        realm: AuthRealm = Depends(realm_provider),
    ) -> str:
        principal = require_authentication(principal)
        if not realm.has_permission(principal, permission):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission required: {permission}",
            )
        return principal

    return _check_permission


def require_role(
    role: str,
    realm_provider: RealmProvider = get_realm,
    principal_provider: PrincipalProvider = get_current_principal,
):
    """Create a dependency that requires a specific role."""
    async def _check_role(
        principal: Optional[str] = Depends(principal_provider),
        realm: AuthRealm = Depends(realm_provider),
    ) -> str:
        principal = require_authentication(principal)
        if not realm.has_role(principal, role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role required: {role}",
            )
        return principal

    return _check_role
