"""Realms feature: pluggable authentication and grant lookup."""

from .entities import (
    Account,
    AuthRealm,
    DatabaseRealmConfig,
    GrantSet,
    MemoryRealmConfig,
    PrincipalGrants,
    PropertiesRealmConfig,
    RealmSnapshot,
)
from .registry import (
    RealmFactory,
    RealmRegistry,
    create_default_registry,
    create_realm,
    create_realm_from_settings,
    default_registry,
)
from .repositories import DatabaseRealm, MemoryRealm, PropertiesRealm
from .services import AuthenticatedUser, GrantSetAuthorizer, RealmAuthService

__all__ = [
    # Entities
    "Account",
    "AuthRealm",
    "DatabaseRealmConfig",
    "GrantSet",
    "MemoryRealmConfig",
    "PrincipalGrants",
    "PropertiesRealmConfig",
    "RealmSnapshot",

    # Realms
    "DatabaseRealm",
    "MemoryRealm",
    "PropertiesRealm",

    # Registry
    "RealmFactory",
    "RealmRegistry",
    "create_default_registry",
    "create_realm",
    "create_realm_from_settings",
    "default_registry",

    # Services
    "AuthenticatedUser",
    "GrantSetAuthorizer",
    "RealmAuthService",
]
