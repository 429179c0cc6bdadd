"""
Market Data Service

The operations the valuation core consumes from the upstream provider.
Every operation is fail-soft: upstream failures are logged and come back
as an empty list or None, never as an exception.
"""
import logging
from typing import Awaitable, List, Optional, TypeVar

from ..clients.fmp_client import FMPClient, get_fmp_client
from ..models.fmp import (
    CompanyProfile,
    DividendEvent,
    EarningsReport,
    TreasuryCurvePoint,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class MarketDataService:
    """Typed, fail-soft access to earnings, shares, treasury, profile, market cap and dividends."""

    def __init__(self, client: Optional[FMPClient] = None):
        self.client = client or get_fmp_client()

    async def _safe(self, fetch: Awaitable[Optional[T]], label: str) -> Optional[T]:
        try:
            return await fetch
        except Exception as e:
            logger.error(f"Error fetching {label}: {e}")
            return None

    async def get_earnings(self, symbol: str) -> List[EarningsReport]:
        reports = await self._safe(self.client.get_earnings(symbol), f"earnings for {symbol}")
        return reports or []

    async def get_outstanding_shares(self, symbol: str) -> Optional[float]:
        records = await self._safe(self.client.get_shares_float(symbol), f"shares for {symbol}")
        if records and records[0].outstanding_shares:
            return records[0].outstanding_shares
        return None

    async def get_treasury_rates(self) -> List[TreasuryCurvePoint]:
        points = await self._safe(self.client.get_treasury_rates(), "treasury rates")
        return points or []

    async def get_company_profile(self, symbol: str) -> Optional[CompanyProfile]:
        profiles = await self._safe(self.client.get_profile(symbol), f"profile for {symbol}")
        if profiles:
            return profiles[0]
        return None

    async def get_market_cap(self, symbol: str) -> Optional[float]:
        snapshots = await self._safe(self.client.get_market_cap(symbol), f"market cap for {symbol}")
        if snapshots and snapshots[0].market_cap:
            return snapshots[0].market_cap
        return None

    async def get_dividends(self, symbol: str) -> List[DividendEvent]:
        events = await self._safe(self.client.get_dividends(symbol), f"dividends for {symbol}")
        return events or []


def get_market_data_service() -> MarketDataService:
    """Provides a MarketDataService bound to the shared FMP client."""
    return MarketDataService()
