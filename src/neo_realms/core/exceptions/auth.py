"""Authentication and authorization exceptions."""

from typing import Optional

from .base import NeoRealmsError


class AuthenticationError(NeoRealmsError):
    """Raised when a realm rejects credentials.

    The message and details are identical for every rejection reason
    (unknown principal, wrong secret, disabled account, malformed
    credentials) so callers cannot enumerate accounts.
    """

    GENERIC_MESSAGE = "Authentication failed"

    def __init__(self, realm: Optional[str] = None):
        details = {"realm": realm} if realm else {}
        super().__init__(self.GENERIC_MESSAGE, "AUTHENTICATION_FAILED", details)


class AuthorizationError(NeoRealmsError):
    """Raised when an authenticated principal lacks a required role."""

    def __init__(
        self,
        message: str = "Authorization failed",
        principal: Optional[str] = None,
        role: Optional[str] = None,
        error_code: str = "AUTHORIZATION_FAILED",
    ):
        super().__init__(message, error_code)
        if principal:
            self.details["principal"] = principal
        if role:
            self.details["role"] = role


class PermissionDeniedError(AuthorizationError):
    """Raised when an authenticated principal lacks a required permission."""

    def __init__(
        self,
        message: str = "Permission denied",
        principal: Optional[str] = None,
        permission: Optional[str] = None,
    ):
        super().__init__(message, principal=principal, error_code="PERMISSION_DENIED")
        if permission:
            self.details["permission"] = permission
