"""Snapshot-backed role and permission checks shared by all realms."""

import logging
from typing import Optional

from ....core.exceptions import RealmNotInitializedError
from ...permissions.entities import parse_permission
from ...permissions.services import WildcardPermissionMatcher
from ..entities import RealmSnapshot

logger = logging.getLogger(__name__)


class GrantSetAuthorizer:
    """Answers role and permission checks from the currently published snapshot.

    Readers take a single reference to the snapshot per call, so a concurrent
    ``publish`` is never observed half-applied.
    """

    def __init__(self, realm_name: str, matcher: Optional[WildcardPermissionMatcher] = None):
        self.realm_name = realm_name
        self.matcher = matcher or WildcardPermissionMatcher()
        self._snapshot: Optional[RealmSnapshot] = None

    @property
    def initialized(self) -> bool:
        return self._snapshot is not None

    @property
    def snapshot(self) -> RealmSnapshot:
        """Current snapshot.

        Raises:
            RealmNotInitializedError: If nothing has been published yet
        """
        snapshot = self._snapshot
        if snapshot is None:
            raise RealmNotInitializedError(realm=self.realm_name)
        return snapshot

    def require_initialized(self) -> RealmSnapshot:
        """Return the live snapshot or raise RealmNotInitializedError."""
        return self.snapshot

    def publish(self, snapshot: RealmSnapshot) -> None:
        """Replace the live snapshot."""
        self._snapshot = snapshot
        logger.debug(
            f"Published snapshot for realm '{self.realm_name}' "
            f"with {len(snapshot.grant_set)} principals"
        )

    def reset(self) -> None:
        """Drop the live snapshot; later calls raise RealmNotInitializedError."""
        self._snapshot = None

    def has_role(self, principal: str, role: str) -> bool:
        grants = self.snapshot.grant_set.get(principal)
        return grants is not None and role in grants.roles

    def has_permission(self, principal: str, permission: str) -> bool:
        grants = self.snapshot.grant_set.get(principal)
        if grants is None:
            return False
        return self.matcher.implies_any(grants.permissions, parse_permission(permission))
