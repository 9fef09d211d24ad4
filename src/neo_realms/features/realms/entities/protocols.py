"""Realm protocol contract."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class AuthRealm(Protocol):
    """Protocol every backing realm implementation honors.

    A realm is constructed once, initialized once with ``init``, and then
    serves concurrent ``login``/``has_role``/``has_permission`` calls.
    """

    name: str

    @property
    def initialized(self) -> bool:
        """Whether ``init`` has completed."""
        ...

    async def init(self, config: Optional[Mapping[str, Any]] = None) -> None:
        """Validate configuration and load the backing store.

        Raises:
            ConfigurationError: If configuration is invalid or init was already called
            BackingStoreError: If the store is unreachable or malformed
        """
        ...

    async def login(self, credentials: Mapping[str, Any]) -> str:
        """Authenticate credentials and return the principal identifier.

        Raises:
            AuthenticationError: On any rejection, without revealing the reason
            BackingStoreError: If the store cannot be queried
            RealmNotInitializedError: If called before ``init``
        """
        ...

    def has_role(self, principal: str, role: str) -> bool:
        """Check role membership; unknown principals have no roles."""
        ...

    def has_permission(self, principal: str, permission: str) -> bool:
        """Check whether any granted permission implies ``permission``."""
        ...

    async def reload(self) -> None:
        """Re-read the backing store and atomically publish a new snapshot."""
        ...

    async def close(self) -> None:
        """Release background tasks and connections."""
        ...
