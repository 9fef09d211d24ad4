"""Properties-file backed realm."""

import asyncio
import contextlib
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from ....config.constants import RealmType
from ....core.exceptions import BackingStoreError, ConfigurationError
from ...permissions.services import WildcardPermissionMatcher
from ..entities import PropertiesRealmConfig, RealmSnapshot, validate_realm_config
from ..services import GrantSetAuthorizer, authenticate_account
from .properties_parser import build_accounts, read_properties_file, resolve_properties_path

logger = logging.getLogger(__name__)


class PropertiesRealm:
    """Realm whose users and roles live in a ``.properties`` file.

    Config keys:
        properties_path: ``classpath:``, ``file:`` or plain path
            (default ``classpath:realm-users.properties``)
        search_paths: directories searched for ``classpath:`` resources
        reload_interval_seconds: when set, poll the file and reload on change
        encoding: file encoding (default utf-8)
    """

    realm_type = RealmType.PROPERTIES

    def __init__(self, name: str = "properties", matcher: Optional[WildcardPermissionMatcher] = None):
        self.name = name
        self._authorizer = GrantSetAuthorizer(name, matcher)
        self._config: Optional[PropertiesRealmConfig] = None
        self._path: Optional[Path] = None
        self._loaded_mtime_ns: Optional[int] = None
        self._initializing = False
        self._reload_lock = asyncio.Lock()
        self._reload_task: Optional[asyncio.Task] = None

    @property
    def initialized(self) -> bool:
        return self._authorizer.initialized

    @property
    def path(self) -> Optional[Path]:
        """Resolved properties file, once initialized."""
        return self._path

    async def init(self, config: Optional[Mapping[str, Any]] = None) -> None:
        if self.initialized or self._initializing:
            raise ConfigurationError("Realm is already initialized", realm=self.name)

        self._initializing = True
        try:
            realm_config = validate_realm_config(PropertiesRealmConfig, config, self.name)
            path = resolve_properties_path(
                realm_config.properties_path, realm_config.search_paths
            )
            snapshot, mtime_ns = await asyncio.to_thread(self._load, path, realm_config.encoding)

            self._config = realm_config
            self._path = path
            self._loaded_mtime_ns = mtime_ns
            self._authorizer.publish(snapshot)
        finally:
            self._initializing = False

        logger.info(
            f"Realm '{self.name}' initialized from {path} "
            f"with {len(snapshot.accounts)} users"
        )

        if realm_config.reload_interval_seconds:
            self._start_reload_task(realm_config.reload_interval_seconds)

    @staticmethod
    def _load(path: Path, encoding: str):
        entries, mtime_ns = read_properties_file(path, encoding)
        accounts, role_permissions = build_accounts(entries)
        return RealmSnapshot.from_accounts(accounts, role_permissions), mtime_ns

    async def login(self, credentials: Mapping[str, Any]) -> str:
        snapshot = self._authorizer.require_initialized()
        return authenticate_account(snapshot.accounts, credentials, self.name)

    def has_role(self, principal: str, role: str) -> bool:
        return self._authorizer.has_role(principal, role)

    def has_permission(self, principal: str, permission: str) -> bool:
        return self._authorizer.has_permission(principal, permission)

    async def reload(self) -> None:
        """Re-read the properties file and publish the result.

        Raises:
            BackingStoreError: If the file cannot be read; the previous
                snapshot stays live
            RealmNotInitializedError: If called before ``init``
        """
        self._authorizer.require_initialized()
        async with self._reload_lock:
            snapshot, mtime_ns = await asyncio.to_thread(
                self._load, self._path, self._config.encoding
            )
            self._loaded_mtime_ns = mtime_ns
            self._authorizer.publish(snapshot)
        logger.info(f"Realm '{self.name}' reloaded from {self._path}")

    async def reload_if_changed(self) -> bool:
        """Reload only when the file's modification time moved.

        Returns:
            True if a reload happened
        """
        self._authorizer.require_initialized()
        try:
            mtime_ns = (await asyncio.to_thread(self._path.stat)).st_mtime_ns
        except OSError as e:
            raise BackingStoreError(
                f"Cannot stat properties file: {self._path}",
                store="properties",
                reason=str(e),
            ) from e

        if mtime_ns == self._loaded_mtime_ns:
            return False
        await self.reload()
        return True

    def _start_reload_task(self, interval_seconds: float) -> None:
        """Start periodic reload task."""
        async def reload_loop():
            while True:
                try:
                    await asyncio.sleep(interval_seconds)
                    await self.reload_if_changed()
                except asyncio.CancelledError:
                    break
                except BackingStoreError as e:
                    logger.warning(f"Realm '{self.name}' reload failed, keeping previous grants: {e}")
                except Exception as e:
                    logger.error(f"Realm '{self.name}' reload task error: {e}")

        self._reload_task = asyncio.create_task(reload_loop())

    async def close(self) -> None:
        task, self._reload_task = self._reload_task, None
        if task and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
