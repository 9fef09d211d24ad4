"""Realm configuration schemas.

Each realm validates its configuration bag eagerly against one of these
models. Unknown keys are rejected so typos surface at ``init`` time.
"""

from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ....config.constants import DatabaseDefaults, PropertiesDefaults
from ....core.exceptions import ConfigurationError

ConfigModel = TypeVar("ConfigModel", bound=BaseModel)


class PropertiesRealmConfig(BaseModel):
    """Configuration for the properties-file realm."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    properties_path: str = Field(default=PropertiesDefaults.RESOURCE_PATH, min_length=1)
    search_paths: List[str] = Field(default_factory=list)
    reload_interval_seconds: Optional[float] = Field(default=None, gt=0)
    encoding: str = "utf-8"


class MemoryUserConfig(BaseModel):
    """A single user entry of the in-memory realm."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    password: str
    roles: List[str] = Field(default_factory=list)
    permissions: List[str] = Field(default_factory=list)
    enabled: bool = True


class MemoryRealmConfig(BaseModel):
    """Configuration for the in-memory realm."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    users: Dict[str, MemoryUserConfig]
    roles: Dict[str, List[str]] = Field(default_factory=dict)


class DatabaseRealmConfig(BaseModel):
    """Configuration for the asyncpg-backed database realm."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    dsn: str = Field(min_length=1)
    authentication_query: str = DatabaseDefaults.AUTHENTICATION_QUERY
    user_roles_query: str = DatabaseDefaults.USER_ROLES_QUERY
    role_permissions_query: str = DatabaseDefaults.ROLE_PERMISSIONS_QUERY
    min_pool_size: int = Field(default=DatabaseDefaults.MIN_POOL_SIZE, ge=0)
    max_pool_size: int = Field(default=DatabaseDefaults.MAX_POOL_SIZE, ge=1)
    command_timeout: float = Field(default=DatabaseDefaults.COMMAND_TIMEOUT_SECONDS, gt=0)


def validate_realm_config(
    model: Type[ConfigModel],
    config: Optional[Mapping[str, Any]],
    realm: str,
) -> ConfigModel:
    """Validate a configuration bag against a realm schema.

    Args:
        model: Pydantic model describing the realm's configuration
        config: Raw configuration mapping (None is treated as empty)
        realm: Realm name used in error details

    Returns:
        Validated configuration model

    Raises:
        ConfigurationError: If keys are missing, unknown, or ill-typed
    """
    if config is not None and not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Realm configuration must be a mapping, got {type(config).__name__}",
            realm=realm,
        )

    try:
        return model.model_validate(dict(config or {}))
    except ValidationError as e:
        first = e.errors()[0]
        config_key = ".".join(str(loc) for loc in first.get("loc", ())) or None
        raise ConfigurationError(
            f"Invalid {realm} realm configuration: {first.get('msg', 'invalid value')}",
            config_key=config_key,
            realm=realm,
        ) from e
