"""Base exceptions for neo-realms.

All exceptions inherit from NeoRealmsError and carry an error code and a
details mapping so hosts can render them consistently.
"""

from typing import Any, Dict, Optional


class NeoRealmsError(Exception):
    """Base exception for all neo-realms errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }
