"""In-memory realm configured directly from a mapping."""

import logging
from typing import Any, Mapping, Optional

from ....config.constants import RealmType
from ....core.exceptions import ConfigurationError
from ...permissions.services import WildcardPermissionMatcher
from ..entities import Account, MemoryRealmConfig, RealmSnapshot, validate_realm_config
from ..services import GrantSetAuthorizer, authenticate_account

logger = logging.getLogger(__name__)


def _snapshot_from_config(config: MemoryRealmConfig) -> RealmSnapshot:
    accounts = [
        Account(
            principal=username,
            secret=user.password,
            roles=frozenset(user.roles),
            permissions=tuple(user.permissions),
            enabled=user.enabled,
        )
        for username, user in config.users.items()
    ]
    return RealmSnapshot.from_accounts(accounts, config.roles)


class MemoryRealm:
    """Realm holding its users and roles in process memory.

    Example config::

        {
            "users": {"paulo": {"password": "secret", "roles": ["admin"]}},
            "roles": {"admin": ["*"]},
        }
    """

    realm_type = RealmType.MEMORY

    def __init__(self, name: str = "memory", matcher: Optional[WildcardPermissionMatcher] = None):
        self.name = name
        self._authorizer = GrantSetAuthorizer(name, matcher)
        self._config: Optional[MemoryRealmConfig] = None

    @property
    def initialized(self) -> bool:
        return self._authorizer.initialized

    async def init(self, config: Optional[Mapping[str, Any]] = None) -> None:
        if self.initialized:
            raise ConfigurationError("Realm is already initialized", realm=self.name)

        realm_config = validate_realm_config(MemoryRealmConfig, config, self.name)
        self._config = realm_config
        self._authorizer.publish(_snapshot_from_config(realm_config))
        logger.info(f"Realm '{self.name}' initialized with {len(realm_config.users)} users")

    async def update(self, config: Mapping[str, Any]) -> None:
        """Validate a replacement configuration and publish it atomically.

        Raises:
            ConfigurationError: If the replacement is invalid; current grants stay live
            RealmNotInitializedError: If called before ``init``
        """
        self._authorizer.require_initialized()
        realm_config = validate_realm_config(MemoryRealmConfig, config, self.name)
        self._config = realm_config
        self._authorizer.publish(_snapshot_from_config(realm_config))
        logger.info(f"Realm '{self.name}' updated with {len(realm_config.users)} users")

    async def login(self, credentials: Mapping[str, Any]) -> str:
        snapshot = self._authorizer.require_initialized()
        return authenticate_account(snapshot.accounts, credentials, self.name)

    def has_role(self, principal: str, role: str) -> bool:
        return self._authorizer.has_role(principal, role)

    def has_permission(self, principal: str, permission: str) -> bool:
        return self._authorizer.has_permission(principal, permission)

    async def reload(self) -> None:
        """Rebuild the snapshot from the current configuration."""
        self._authorizer.require_initialized()
        self._authorizer.publish(_snapshot_from_config(self._config))

    async def close(self) -> None:
        return None
