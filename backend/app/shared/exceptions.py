"""
Shared Exception Classes

Errors raised by the market data and ticker group domains. Every error carries
a machine-readable code and a details dict, and maps to one HTTP status when it
reaches the API layer.
"""

# Standard library imports
from typing import Any, Dict, Optional

# Third-party imports
from fastapi import HTTPException


class DomainException(Exception):
    """Base class: message, error_code and details rendered as the error body."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, "error_code": self.error_code, "details": self.details}


# Market data

class MarketDataException(DomainException):
    pass


class DataSourceException(MarketDataException):
    """The upstream provider failed, answered non-2xx or sent a body that is not JSON."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            message=f"Upstream '{source}' failed: {reason}",
            error_code="DATA_SOURCE_ERROR",
            details={"source": source, "reason": reason}
        )


class InvalidTickerException(MarketDataException):
    def __init__(self, ticker: str):
        super().__init__(
            message=f"'{ticker}' is not a valid ticker symbol",
            error_code="INVALID_TICKER",
            details={"ticker": ticker}
        )


class APIKeyMissingException(DomainException):
    """The server-held credential for an upstream service is not configured."""

    def __init__(self, service: str, key_name: str):
        super().__init__(
            message=f"{key_name} is not set, cannot call {service}",
            error_code="API_KEY_MISSING",
            details={"service": service, "key_name": key_name}
        )


# Ticker groups

class TickerGroupException(DomainException):
    pass


class GroupNotFoundException(TickerGroupException):
    def __init__(self, index: int):
        super().__init__(
            message=f"No ticker group at index {index}",
            error_code="GROUP_NOT_FOUND",
            details={"index": index}
        )


class DefaultGroupProtectedException(TickerGroupException):
    def __init__(self, name: str):
        super().__init__(
            message="Cannot delete the default group.",
            error_code="DEFAULT_GROUP_PROTECTED",
            details={"name": name}
        )


class LastGroupException(TickerGroupException):
    def __init__(self, name: str):
        super().__init__(
            message="Cannot delete the last group. Create a new group first.",
            error_code="LAST_GROUP",
            details={"name": name}
        )


class InvalidGroupNameException(TickerGroupException):
    """Group names must be non-empty once trimmed."""

    def __init__(self, name: str):
        super().__init__(
            message="Group name must not be empty",
            error_code="INVALID_GROUP_NAME",
            details={"name": name}
        )


# Unlisted domain errors fall back to 500
HTTP_STATUS_BY_EXCEPTION = {
    InvalidTickerException: 400,
    InvalidGroupNameException: 400,
    GroupNotFoundException: 404,
    DefaultGroupProtectedException: 409,
    LastGroupException: 409,
    APIKeyMissingException: 500,
    DataSourceException: 502,
}


def domain_exception_to_http_exception(exception: DomainException) -> HTTPException:
    """
    Convert a domain error to an HTTPException.

    Args:
        exception: Domain-specific exception

    Returns:
        HTTPException whose detail is the {"error", "error_code", "details"} body
    """
    status_code = HTTP_STATUS_BY_EXCEPTION.get(type(exception), 500)
    return HTTPException(status_code=status_code, detail=exception.to_body())
