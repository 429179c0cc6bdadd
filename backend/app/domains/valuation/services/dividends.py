"""Dividend history -> latest payment, trailing total and payment frequency."""
from datetime import date, datetime, timedelta
from typing import Optional, Sequence, Union

from app.domains.market_data.models import DividendEvent
from app.shared.dates import parse_provider_date, resolve_today
from ..config import DIVIDEND_FREQUENCY_THRESHOLDS
from ..models.valuation import DividendFrequency, DividendSummary


def classify_dividend_frequency(events_in_window: int) -> Optional[DividendFrequency]:
    for threshold, frequency in DIVIDEND_FREQUENCY_THRESHOLDS:
        if events_in_window >= threshold:
            return frequency
    return None


def summarize_dividends(
    events: Sequence[DividendEvent],
    now: Optional[Union[datetime, date]] = None,
    trailing_events: int = 4,
    window_days: int = 365
) -> DividendSummary:
    """
    Summarize a dividend history ordered most recent first.

    Args:
        events: Dividend events, most recent first
        now: Reference time for the frequency window (defaults to today)
        trailing_events: How many recent events make up the trailing total
        window_days: Length of the frequency window

    Returns:
        DividendSummary; every field is None for an empty history
    """
    if not events:
        return DividendSummary()

    # Sum of the most recent payments, fewer when fewer exist
    trailing_total = sum(event.dividend or 0.0 for event in events[:trailing_events])

    cutoff = resolve_today(now) - timedelta(days=window_days)
    in_window = 0
    for event in events:
        event_date = parse_provider_date(event.date)
        if event_date is not None and event_date >= cutoff:
            in_window += 1

    return DividendSummary(
        latest_dividend=events[0],
        annual_yield=trailing_total,
        frequency=classify_dividend_frequency(in_window),
    )
