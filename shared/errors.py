"""
Shared error handling for the SSO ticket services.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class SSOException(Exception):
    """Base exception for SSO services."""

    status_code = 400

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self, request_id: Optional[str] = None) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id,
            code=self.code,
            message=self.message,
            details=self.details
        )


class TicketStoreError(SSOException):
    """Ticket store is unreachable or failed to answer."""

    status_code = 503

    def __init__(self, message: str = "Ticket store error", details: Optional[Dict[str, Any]] = None):
        super().__init__("TICKET_STORE_ERROR", message, details)


class ConfigurationError(SSOException):
    """Service is misconfigured."""

    status_code = 500

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)
