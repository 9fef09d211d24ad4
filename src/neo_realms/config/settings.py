"""
Environment-driven settings for selecting and configuring a realm.

Hosts that prefer twelve-factor configuration can build their realm from
``RealmSettings`` instead of assembling a configuration mapping by hand.
"""
from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DatabaseDefaults, PropertiesDefaults, RealmType


class RealmSettings(BaseSettings):
    """Realm selection settings read from ``REALM_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REALM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Read from REALM_TYPE rather than REALM_REALM_TYPE
    realm_type: RealmType = Field(
        default=RealmType.PROPERTIES,
        validation_alias=AliasChoices("realm_type", "REALM_TYPE"),
    )

    # Properties realm
    properties_path: str = Field(default=PropertiesDefaults.RESOURCE_PATH)
    search_paths: List[str] = Field(default_factory=list)
    reload_interval_seconds: Optional[float] = Field(default=None, gt=0)

    # Database realm
    database_dsn: Optional[SecretStr] = Field(default=None)
    database_min_pool_size: int = Field(default=DatabaseDefaults.MIN_POOL_SIZE, ge=0)
    database_max_pool_size: int = Field(default=DatabaseDefaults.MAX_POOL_SIZE, ge=1)

    def to_realm_config(self) -> Dict[str, Any]:
        """Render the configuration bag expected by the selected realm type."""
        if self.realm_type == RealmType.PROPERTIES:
            config: Dict[str, Any] = {"properties_path": self.properties_path}
            if self.search_paths:
                config["search_paths"] = list(self.search_paths)
            if self.reload_interval_seconds is not None:
                config["reload_interval_seconds"] = self.reload_interval_seconds
            return config

        if self.realm_type == RealmType.DATABASE:
            config = {
                "min_pool_size": self.database_min_pool_size,
                "max_pool_size": self.database_max_pool_size,
            }
            if self.database_dsn is not None:
                config["dsn"] = self.database_dsn.get_secret_value()
            return config

        # The memory realm has no environment representation
        return {}


@lru_cache()
def get_realm_settings() -> RealmSettings:
    """Get cached realm settings instance."""
    return RealmSettings()
