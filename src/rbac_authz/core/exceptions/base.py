"""Base exceptions for rbac-authz.

All exceptions inherit from RbacAuthzError and carry an error code and a
details dictionary describing what was being evaluated when they occurred.
"""

from typing import Any, Dict, Optional


class RbacAuthzError(Exception):
    """Base exception for all rbac-authz errors."""

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
        """Convert exception to a dictionary for structured logging."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }
