"""Relational-database backed realm using asyncpg."""

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Set

import asyncpg

from ....config.constants import RealmType
from ....core.exceptions import AuthenticationError, BackingStoreError, ConfigurationError
from ...permissions.services import WildcardPermissionMatcher
from ..entities import DatabaseRealmConfig, GrantSet, RealmSnapshot, validate_realm_config
from ..services import GrantSetAuthorizer, extract_username_password, secrets_match

logger = logging.getLogger(__name__)

_STORE = "database"

# Driver failures that mean the store could not answer
DRIVER_ERRORS = (
    OSError,
    asyncio.TimeoutError,
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
)


class DatabaseRealm:
    """Realm backed by user, role and permission tables.

    Grants are loaded into a snapshot at ``init``/``reload``; ``login`` looks
    up the stored secret on every call so password changes apply immediately.

    Expected query shapes:
        authentication_query($1=username) -> (password[, enabled])
        user_roles_query -> rows of (username, role_name)
        role_permissions_query -> rows of (role_name, permission)
    """

    realm_type = RealmType.DATABASE

    def __init__(
        self,
        name: str = "database",
        pool: Optional[Any] = None,
        matcher: Optional[WildcardPermissionMatcher] = None,
    ):
        """Initialize database realm.

        Args:
            name: Realm name used in logs and error details
            pool: Optional existing asyncpg pool; when omitted one is created
                from the ``dsn`` config key and closed by ``close``
            matcher: Optional permission matcher
        """
        self.name = name
        self._pool = pool
        self._owns_pool = pool is None
        self._authorizer = GrantSetAuthorizer(name, matcher)
        self._config: Optional[DatabaseRealmConfig] = None
        self._initializing = False

    @property
    def initialized(self) -> bool:
        return self._authorizer.initialized

    async def init(self, config: Optional[Mapping[str, Any]] = None) -> None:
        if self.initialized or self._initializing:
            raise ConfigurationError("Realm is already initialized", realm=self.name)

        self._initializing = True
        try:
            realm_config = validate_realm_config(DatabaseRealmConfig, config, self.name)
            if realm_config.min_pool_size > realm_config.max_pool_size:
                raise ConfigurationError(
                    "min_pool_size must not exceed max_pool_size",
                    config_key="min_pool_size",
                    realm=self.name,
                )
            self._config = realm_config

            if self._pool is None:
                self._pool = await self._create_pool(realm_config)

            try:
                snapshot = await self._load_snapshot()
            except BackingStoreError:
                await self._close_owned_pool()
                raise
            self._authorizer.publish(snapshot)
        finally:
            self._initializing = False

        logger.info(f"Realm '{self.name}' initialized with {len(snapshot.grant_set)} principals")

    async def _create_pool(self, config: DatabaseRealmConfig):
        try:
            return await asyncpg.create_pool(
                dsn=config.dsn,
                min_size=config.min_pool_size,
                max_size=config.max_pool_size,
                command_timeout=config.command_timeout,
            )
        except DRIVER_ERRORS as e:
            logger.error(f"Realm '{self.name}' failed to connect to database: {e}")
            raise BackingStoreError(
                "Cannot connect to identity database", store=_STORE, reason=str(e)
            ) from e

    def _require_pool(self):
        pool = self._pool
        if pool is None:
            raise BackingStoreError("Realm is closed", store=_STORE)
        return pool

    async def _load_snapshot(self) -> RealmSnapshot:
        pool = self._require_pool()
        try:
            role_rows = await pool.fetch(self._config.user_roles_query)
            permission_rows = await pool.fetch(self._config.role_permissions_query)
        except DRIVER_ERRORS as e:
            logger.error(f"Realm '{self.name}' failed to load grants: {e}")
            raise BackingStoreError(
                "Cannot load grants from identity database", store=_STORE, reason=str(e)
            ) from e

        user_roles: Dict[str, Set[str]] = {}
        role_permissions: Dict[str, Set[str]] = {}
        try:
            for row in role_rows:
                user_roles.setdefault(row[0], set()).add(row[1])
            for row in permission_rows:
                role_permissions.setdefault(row[0], set()).add(row[1])
        except (IndexError, TypeError, KeyError) as e:
            raise BackingStoreError(
                "Identity database returned malformed grant rows", store=_STORE, reason=str(e)
            ) from e

        return RealmSnapshot(grant_set=GrantSet.build(user_roles, role_permissions))

    async def login(self, credentials: Mapping[str, Any]) -> str:
        self._authorizer.require_initialized()

        pair = extract_username_password(credentials)
        if pair is None:
            secrets_match(None, "")
            logger.debug(f"Login rejected by realm '{self.name}': malformed credentials")
            raise AuthenticationError(realm=self.name)
        username, password = pair

        pool = self._require_pool()
        try:
            row = await pool.fetchrow(self._config.authentication_query, username)
        except DRIVER_ERRORS as e:
            logger.error(f"Realm '{self.name}' failed to look up credentials: {e}")
            raise BackingStoreError(
                "Cannot query identity database", store=_STORE, reason=str(e)
            ) from e

        stored = str(row[0]) if row is not None and row[0] is not None else None
        enabled = bool(row[1]) if row is not None and len(row) > 1 else True
        matched = secrets_match(stored, password)
        if not matched or not enabled:
            logger.debug(f"Login rejected by realm '{self.name}' for '{username}'")
            raise AuthenticationError(realm=self.name)

        return username

    def has_role(self, principal: str, role: str) -> bool:
        return self._authorizer.has_role(principal, role)

    def has_permission(self, principal: str, permission: str) -> bool:
        return self._authorizer.has_permission(principal, permission)

    async def reload(self) -> None:
        """Reload grants; the previous snapshot stays live on failure."""
        self._authorizer.require_initialized()
        snapshot = await self._load_snapshot()
        self._authorizer.publish(snapshot)
        logger.info(f"Realm '{self.name}' reloaded with {len(snapshot.grant_set)} principals")

    async def _close_owned_pool(self) -> None:
        if self._owns_pool and self._pool is not None:
            pool, self._pool = self._pool, None
            await pool.close()

    async def close(self) -> None:
        self._authorizer.reset()
        await self._close_owned_pool()
