"""
Valuation Service

Per-ticker "revenue / interest rate" valuation: the average quarterly revenue
reported so far this year, per outstanding share, scaled by the aggregate
treasury rate.
"""
import logging
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from app.domains.market_data.models import EarningsReport
from app.shared.dates import parse_provider_date, resolve_today
from ..models.valuation import ExclusionReason, TickerValuation, ValuationOutcome

logger = logging.getLogger(__name__)


def ytd_reports(
    earnings: Sequence[EarningsReport],
    now: Optional[Union[datetime, date]] = None
) -> List[EarningsReport]:
    """Reports with an actual revenue figure dated in the current calendar year."""
    current_year = resolve_today(now).year
    eligible = []
    for report in earnings:
        if report.revenue_actual is None:
            continue
        report_date = parse_provider_date(report.date)
        if report_date is not None and report_date.year == current_year:
            eligible.append(report)
    return eligible


def evaluate_valuation(
    ticker: str,
    earnings: Sequence[EarningsReport],
    interest_rate: float,
    outstanding_shares: Optional[float],
    now: Optional[Union[datetime, date]] = None
) -> ValuationOutcome:
    """
    Value one ticker, or say why it cannot be valued.

    Args:
        ticker: Ticker symbol
        earnings: Earnings history for the ticker, any order
        interest_rate: Aggregate fractional rate from the treasury curve
        outstanding_shares: Latest share count; None or 0 means unknown
        now: Reference time for the current-year filter (defaults to today)

    Returns:
        ValuationOutcome carrying either the valuation or the exclusion reason
    """
    ytd_data = ytd_reports(earnings, now)

    if not ytd_data:
        logger.info(f"No YTD revenue data for {ticker}")
        return ValuationOutcome(ticker=ticker, exclusion=ExclusionReason.NO_YTD_REVENUE)

    if not outstanding_shares:
        logger.info(f"No outstanding shares data for {ticker}")
        return ValuationOutcome(ticker=ticker, exclusion=ExclusionReason.NO_OUTSTANDING_SHARES)

    ytd_revenue = sum(report.revenue_actual for report in ytd_data)

    # Pro-rate based on quarters reported
    quarters_reported = len(ytd_data)
    quarterly_revenue = ytd_revenue / quarters_reported

    my_value = quarterly_revenue / outstanding_shares * interest_rate

    valuation = TickerValuation(
        ticker=ticker,
        ytd_revenue=ytd_revenue,
        quarterly_revenue=quarterly_revenue,
        interest_rate=interest_rate,
        outstanding_shares=outstanding_shares,
        my_value=my_value,
        quarters_reported=quarters_reported,
    )
    return ValuationOutcome(ticker=ticker, valuation=valuation)


def calculate_valuation(
    ticker: str,
    earnings: Sequence[EarningsReport],
    interest_rate: float,
    outstanding_shares: Optional[float],
    now: Optional[Union[datetime, date]] = None
) -> Optional[TickerValuation]:
    """Value one ticker; None when it has no YTD revenue or no share count."""
    return evaluate_valuation(ticker, earnings, interest_rate, outstanding_shares, now).valuation
