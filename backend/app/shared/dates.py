"""Date helpers shared by the calculators."""
from datetime import date, datetime
from typing import Optional, Union


def parse_provider_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a provider date such as "2025-04-24" or "2025-04-24 16:30:00".

    Returns None for missing or unparseable values.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def resolve_today(now: Optional[Union[datetime, date]] = None) -> date:
    """The calendar day of `now`, defaulting to the local clock."""
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now
