"""Realm entities."""

from .account import Account
from .grant_set import GrantSet, PrincipalGrants, RealmSnapshot
from .protocols import AuthRealm
from .realm_config import (
    DatabaseRealmConfig,
    MemoryRealmConfig,
    MemoryUserConfig,
    PropertiesRealmConfig,
    validate_realm_config,
)

__all__ = [
    "Account",
    "AuthRealm",
    "DatabaseRealmConfig",
    "GrantSet",
    "MemoryRealmConfig",
    "MemoryUserConfig",
    "PrincipalGrants",
    "PropertiesRealmConfig",
    "RealmSnapshot",
    "validate_realm_config",
]
