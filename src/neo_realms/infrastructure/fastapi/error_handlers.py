"""Map neo-realms exceptions onto HTTP responses."""

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ...core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BackingStoreError,
    ConfigurationError,
    NeoRealmsError,
)

logger = logging.getLogger(__name__)

# Most specific classes first; lookup walks the exception's MRO
HTTP_STATUS_MAPPING: Dict[Type[NeoRealmsError], int] = {
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    BackingStoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception."""
    for cls in type(exception).__mro__:
        if cls in HTTP_STATUS_MAPPING:
            return HTTP_STATUS_MAPPING[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def realm_error_handler(request: Request, exc: NeoRealmsError) -> JSONResponse:
    status_code = get_http_status_code(exc)
    if status_code >= 500:
        # Only error and message reach the client
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message} {exc.details}")
        content = {"error": exc.error_code, "message": exc.message}
    else:
        content = exc.to_dict()
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the neo-realms exception handler on an application."""
    app.add_exception_handler(NeoRealmsError, realm_error_handler)
