"""neo-realms - pluggable authentication realms with wildcard permissions.

A realm authenticates a principal against credentials and then answers role
and permission checks from an immutable grant snapshot, independent of the
backing identity store.
"""

from .__version__ import __version__

from .config import (
    PermissionTokens,
    RealmSettings,
    RealmType,
    setup_logging,
)

from .core.exceptions import (
    # Base Exception
    NeoRealmsError,

    # Realm Exceptions
    AuthenticationError,
    AuthorizationError,
    BackingStoreError,
    ConfigurationError,
    PermissionDeniedError,
    RealmNotInitializedError,
)

from .features.permissions import (
    PermissionExpression,
    WildcardPermissionMatcher,
    parse_permission,
)

from .features.realms import (
    # Contract and data
    AuthRealm,
    GrantSet,
    PrincipalGrants,

    # Implementations
    DatabaseRealm,
    MemoryRealm,
    PropertiesRealm,

    # Registry
    RealmRegistry,
    create_realm,
    create_realm_from_settings,
    default_registry,

    # Services
    AuthenticatedUser,
    RealmAuthService,
)

__all__ = [
    "__version__",

    # Configuration
    "PermissionTokens",
    "RealmSettings",
    "RealmType",
    "setup_logging",

    # Exceptions
    "NeoRealmsError",
    "AuthenticationError",
    "AuthorizationError",
    "BackingStoreError",
    "ConfigurationError",
    "PermissionDeniedError",
    "RealmNotInitializedError",

    # Permissions
    "PermissionExpression",
    "WildcardPermissionMatcher",
    "parse_permission",

    # Realms
    "AuthRealm",
    "GrantSet",
    "PrincipalGrants",
    "DatabaseRealm",
    "MemoryRealm",
    "PropertiesRealm",
    "RealmRegistry",
    "create_realm",
    "create_realm_from_settings",
    "default_registry",
    "AuthenticatedUser",
    "RealmAuthService",
]
