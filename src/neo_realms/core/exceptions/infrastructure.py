"""Configuration and backing-store exceptions."""

from typing import Optional

from .base import NeoRealmsError


class ConfigurationError(NeoRealmsError):
    """Raised when a realm is misconfigured or misused.

    Fatal to realm construction; hosts should not retry.
    """

    def __init__(
        self,
        message: str = "Realm configuration error",
        config_key: Optional[str] = None,
        realm: Optional[str] = None,
        error_code: str = "CONFIGURATION_ERROR",
    ):
        super().__init__(message, error_code)
        if config_key:
            self.details["config_key"] = config_key
        if realm:
            self.details["realm"] = realm


class RealmNotInitializedError(ConfigurationError):
    """Raised when a realm operation is invoked before ``init``."""

    def __init__(self, realm: Optional[str] = None):
        super().__init__(
            "Realm has not been initialized",
            realm=realm,
            error_code="REALM_NOT_INITIALIZED",
        )


class BackingStoreError(NeoRealmsError):
    """Raised when the identity store is unreachable or returns malformed data.

    Kept distinct from authentication failures so hosts can apply their
    own retry and backoff policy.
    """

    def __init__(
        self,
        message: str = "Backing store error",
        store: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        super().__init__(message, "BACKING_STORE_ERROR")
        if store:
            self.details["store"] = store
        if reason:
            self.details["reason"] = reason
