"""Exception hierarchy for neo-realms."""

from .auth import AuthenticationError, AuthorizationError, PermissionDeniedError
from .base import NeoRealmsError
from .infrastructure import BackingStoreError, ConfigurationError, RealmNotInitializedError

__all__ = [
    "NeoRealmsError",
    "AuthenticationError",
    "AuthorizationError",
    "PermissionDeniedError",
    "ConfigurationError",
    "RealmNotInitializedError",
    "BackingStoreError",
]
