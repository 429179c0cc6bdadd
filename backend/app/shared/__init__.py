"""
Shared Utilities

Response envelopes, the domain error hierarchy, provider date parsing and the
singleton helper used by the market data, valuation and ticker group domains.
"""

from .response_models import (
    APIResponse, HealthCheckResponse, ValuationResponse, TickerGroupResponse,
    StatusEnum, create_success_response
)
from .exceptions import (
    DomainException, MarketDataException, DataSourceException, InvalidTickerException,
    APIKeyMissingException, TickerGroupException, GroupNotFoundException,
    DefaultGroupProtectedException, LastGroupException, InvalidGroupNameException,
    HTTP_STATUS_BY_EXCEPTION, domain_exception_to_http_exception
)
from .dates import parse_provider_date, resolve_today
from .singleton import get_singleton, pop_singleton

__all__ = [
    # Response models and helpers
    "APIResponse", "HealthCheckResponse", "ValuationResponse", "TickerGroupResponse",
    "StatusEnum", "create_success_response",

    # Exceptions
    "DomainException", "MarketDataException", "DataSourceException", "InvalidTickerException",
    "APIKeyMissingException", "TickerGroupException", "GroupNotFoundException",
    "DefaultGroupProtectedException", "LastGroupException", "InvalidGroupNameException",
    "HTTP_STATUS_BY_EXCEPTION", "domain_exception_to_http_exception",

    # Dates
    "parse_provider_date", "resolve_today",

    # Singletons
    "get_singleton", "pop_singleton",
]
