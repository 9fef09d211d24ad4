"""Realm registry and factory.

A dispatch table from realm type tag to a zero-argument factory. Creating a
realm constructs it and runs ``init`` with the supplied configuration.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from ...config.constants import RealmType
from ...config.settings import RealmSettings, get_realm_settings
from ...core.exceptions import ConfigurationError
from .entities import AuthRealm
from .repositories import DatabaseRealm, MemoryRealm, PropertiesRealm

logger = logging.getLogger(__name__)

RealmFactory = Callable[[], AuthRealm]
RealmTypeLike = Union[RealmType, str]


def _tag(realm_type: RealmTypeLike) -> str:
    if isinstance(realm_type, RealmType):
        return realm_type.value
    return str(realm_type).strip().lower()


class RealmRegistry:
    """Registry of realm factories keyed by type tag."""

    def __init__(self):
        self._factories: Dict[str, RealmFactory] = {}

    def register(
        self,
        realm_type: RealmTypeLike,
        factory: RealmFactory,
        replace: bool = False,
    ) -> None:
        """Register a realm factory.

        Args:
            realm_type: Type tag (a ``RealmType`` or custom string)
            factory: Callable returning an uninitialized realm
            replace: Allow overriding an existing registration

        Raises:
            ValueError: If the tag is already registered and ``replace`` is False
        """
        tag = _tag(realm_type)
        if not tag:
            raise ValueError("Realm type tag must be non-empty")
        if tag in self._factories and not replace:
            raise ValueError(f"Realm type already registered: {tag}")
        self._factories[tag] = factory
        logger.debug(f"Registered realm type '{tag}'")

    def unregister(self, realm_type: RealmTypeLike) -> bool:
        return self._factories.pop(_tag(realm_type), None) is not None

    def is_registered(self, realm_type: RealmTypeLike) -> bool:
        return _tag(realm_type) in self._factories

    def available_types(self) -> List[str]:
        return sorted(self._factories)

    def get_factory(self, realm_type: RealmTypeLike) -> RealmFactory:
        """Look up the factory for a type tag.

        Raises:
            ConfigurationError: If no realm is registered under the tag
        """
        tag = _tag(realm_type)
        try:
            return self._factories[tag]
        except KeyError:
            raise ConfigurationError(
                f"Unknown realm type '{tag}'; available: {', '.join(self.available_types())}",
                config_key="realm_type",
            ) from None

    async def create(
        self,
        realm_type: RealmTypeLike,
        config: Optional[Mapping[str, Any]] = None,
    ) -> AuthRealm:
        """Construct and initialize a realm.

        Raises:
            ConfigurationError: Unknown type or invalid configuration
            BackingStoreError: The realm could not load its store
        """
        realm = self.get_factory(realm_type)()
        await realm.init(config)
        logger.info(f"Created realm '{realm.name}' of type '{_tag(realm_type)}'")
        return realm


def create_default_registry() -> RealmRegistry:
    """Create a registry holding the built-in realm types."""
    registry = RealmRegistry()
    registry.register(RealmType.PROPERTIES, PropertiesRealm)
    registry.register(RealmType.MEMORY, MemoryRealm)
    registry.register(RealmType.DATABASE, DatabaseRealm)
    return registry


default_registry = create_default_registry()


async def create_realm(
    realm_type: RealmTypeLike,
    config: Optional[Mapping[str, Any]] = None,
    registry: Optional[RealmRegistry] = None,
) -> AuthRealm:
    """Construct and initialize a realm from the default (or given) registry."""
    return await (registry or default_registry).create(realm_type, config)


async def create_realm_from_settings(
    settings: Optional[RealmSettings] = None,
    registry: Optional[RealmRegistry] = None,
) -> AuthRealm:
    """Construct and initialize the realm selected by ``REALM_*`` settings."""
    settings = settings or get_realm_settings()
    return await create_realm(settings.realm_type, settings.to_realm_config(), registry)
