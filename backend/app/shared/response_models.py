"""
Shared Response Models

Envelope returned by the dashboard and ticker group endpoints. The market data
proxies do not use it; they pass the upstream body through untouched.
"""

# Standard library imports
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Type

# Third-party imports
from pydantic import BaseModel, Field


class StatusEnum(str, Enum):
    SUCCESS = "success"
    # Service is up but cannot reach the upstream provider (e.g. no API key)
    DEGRADED = "degraded"


class APIResponse(BaseModel):
    """Envelope: status, a human-readable message and the payload."""
    status: StatusEnum = Field(..., description="Response status")
    message: Optional[str] = Field(None, description="Human-readable message")
    data: Optional[Any] = Field(None, description="Response payload")
    timestamp: datetime = Field(default_factory=datetime.now, description="Response timestamp")


class HealthCheckResponse(BaseModel):
    status: StatusEnum = Field(..., description="Service health status")
    service_name: str = Field(..., description="Name of the service")
    version: str = Field(..., description="Service version")
    dependencies: Dict[str, str] = Field(default_factory=dict, description="State of each dependency")
    timestamp: datetime = Field(default_factory=datetime.now, description="Health check timestamp")


class ValuationResponse(APIResponse):
    ticker: Optional[str] = Field(None, description="Ticker the payload describes")
    group: Optional[str] = Field(None, description="Name of the ticker group that was valued")


class TickerGroupResponse(APIResponse):
    active_index: Optional[int] = Field(None, description="Index of the active group after the call")


def create_success_response(
    data: Any = None,
    message: str = "Operation completed successfully",
    response_class: Type[APIResponse] = APIResponse,
    **kwargs
) -> APIResponse:
    """
    Build a success envelope.

    Args:
        data: Response payload
        message: Success message
        response_class: APIResponse subclass to build
        **kwargs: Extra fields of that subclass (ticker, group, active_index)
    """
    return response_class(
        status=StatusEnum.SUCCESS,
        message=message,
        data=data,
        **kwargs
    )
