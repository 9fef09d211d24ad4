"""FastAPI integration for realm-backed authorization."""

from .dependencies import (
    get_current_principal,
    get_realm,
    require_authentication,
    require_permission,
    require_role,
)
from .error_handlers import (
    HTTP_STATUS_MAPPING,
    get_http_status_code,
    realm_error_handler,
    register_exception_handlers,
)

__all__ = [
    "HTTP_STATUS_MAPPING",
    "get_current_principal",
    "get_http_status_code",
    "get_realm",
    "realm_error_handler",
    "register_exception_handlers",
    "require_authentication",
    "require_permission",
    "require_role",
]
