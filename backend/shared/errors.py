"""Typed errors raised by services and mapped to HTTP responses by the API layer.

Hierarchy::

    MarketplaceError          500
    ├── RequestValidationFailed  400  (field-level violations)
    ├── ConflictError            400  (e.g. email already registered)
    ├── UnauthorizedError        401
    ├── ForbiddenError           403
    └── NotFoundError            404
"""

from typing import Any, Dict, List, Optional


class MarketplaceError(Exception):
    """Base class for errors that carry their own HTTP classification."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        """Build the ``{success: false, ...}`` response body."""
        payload: Dict[str, Any] = {"success": False, "message": self.message}
        if self.errors is not None:
            payload["errors"] = self.errors
        return payload


class RequestValidationFailed(MarketplaceError):
    """Malformed or out-of-range input."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors: List[Dict[str, Any]], message: Optional[str] = None):
        super().__init__(message, errors=errors)


class ConflictError(MarketplaceError):
    """Input clashes with existing state. Reported as 400 by convention."""

    status_code = 400
    default_message = "Conflict with existing resource"


class UnauthorizedError(MarketplaceError):
    """Missing or invalid credentials."""

    status_code = 401
    default_message = "Not authenticated"


class ForbiddenError(MarketplaceError):
    """Acting principal may not touch the target resource."""

    status_code = 403
    default_message = "Not authorized"


class NotFoundError(MarketplaceError):
    """Referenced entity does not exist."""

    status_code = 404
    default_message = "Resource not found"
