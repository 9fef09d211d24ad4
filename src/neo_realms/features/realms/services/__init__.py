"""Realm services."""

from .auth_service import AuthenticatedUser, RealmAuthService
from .authorizer import GrantSetAuthorizer
from .credentials import authenticate_account, extract_username_password, secrets_match

__all__ = [
    "AuthenticatedUser",
    "GrantSetAuthorizer",
    "RealmAuthService",
    "authenticate_account",
    "extract_username_password",
    "secrets_match",
]
