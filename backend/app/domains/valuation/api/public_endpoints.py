"""
Public Valuation API Endpoints

Client-facing endpoints behind the industrial yield dashboard: the group
valuation report, the aggregate treasury rate and the company detail view.
"""
import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from app.domains.ticker_groups.services import TickerGroupService, get_group_service
from app.shared.exceptions import InvalidTickerException
from app.shared.response_models import ValuationResponse, create_success_response
from ..models.valuation import SortOrder
from ..services.dashboard_service import DashboardService, get_dashboard_service

logger = logging.getLogger(__name__)

router = APIRouter()

# Exchange symbols such as CAT, BRK.B or RDS-A
TICKER_PATTERN = re.compile(r"^[A-Z0-9][A-Z0-9.\-]*$")


@router.get("/dashboard", response_model=ValuationResponse)
async def get_dashboard(
    group: Optional[int] = Query(None, description="Group index; the active group when omitted"),
    percentage_range: Optional[float] = Query(
        None, description="Tolerance band around the group average, in percent"
    ),
    sort: SortOrder = Query(SortOrder.NONE, description="none, asc or desc by value"),
    dashboard_service: DashboardService = Depends(get_dashboard_service),
    group_service: TickerGroupService = Depends(get_group_service)
):
    """
    Values every ticker of a group against the average treasury rate.

    Tickers without year-to-date revenue or a share count are left out of
    `valuations` and listed under `exclusions`.
    """
    if group is None:
        ticker_group = await group_service.get_active_group()
    else:
        ticker_group = await group_service.get_group(group)
    report = await dashboard_service.get_report(ticker_group.tickers, percentage_range, sort)

    return create_success_response(
        data=report.model_dump(mode="json"),
        message=f"Valued {len(report.valuations)} of {len(ticker_group.tickers)} tickers",
        response_class=ValuationResponse,
        group=ticker_group.name,
    )


@router.get("/treasury-rate", response_model=ValuationResponse)
async def get_treasury_rate(dashboard_service: DashboardService = Depends(get_dashboard_service)):
    """Average of the most recent treasury curve, as a fraction."""
    rates = await dashboard_service.load_rates()
    return create_success_response(
        data=rates.model_dump(mode="json"),
        message="Treasury rate retrieved",
        response_class=ValuationResponse,
    )


@router.get("/company/{ticker}", response_model=ValuationResponse)
async def get_company_info(
    ticker: str = Path(
        ...,
        description="The stock ticker symbol (e.g., CAT)",
        min_length=1,
        max_length=10
    ),
    dashboard_service: DashboardService = Depends(get_dashboard_service)
):
    """Profile, market capitalization and dividend summary for one company."""
    ticker_upper = ticker.strip().upper()
    if not TICKER_PATTERN.match(ticker_upper):
        raise InvalidTickerException(ticker)
    info = await dashboard_service.get_company_info(ticker_upper)
    return create_success_response(
        data=info.model_dump(mode="json"),
        message="Company information retrieved",
        response_class=ValuationResponse,
        ticker=ticker_upper,
    )
