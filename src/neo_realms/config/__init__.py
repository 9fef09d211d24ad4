"""Configuration module for neo-realms."""

from .constants import (
    CredentialFields,
    DatabaseDefaults,
    PermissionTokens,
    PropertiesDefaults,
    RealmType,
)
from .logging_config import (
    LogFormat,
    LoggingConfig,
    LogVerbosity,
    get_logger,
    setup_logging,
)
from .settings import RealmSettings, get_realm_settings

__all__ = [
    # Constants
    "CredentialFields",
    "DatabaseDefaults",
    "PermissionTokens",
    "PropertiesDefaults",
    "RealmType",

    # Logging
    "LogFormat",
    "LoggingConfig",
    "LogVerbosity",
    "get_logger",
    "setup_logging",

    # Settings
    "RealmSettings",
    "get_realm_settings",
]
