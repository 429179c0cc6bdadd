"""
Dashboard Service

Runs one load cycle for a ticker list: treasury rate first, then earnings and
share counts for every ticker concurrently, then the per-ticker valuation.
Builds the report the dashboard renders from the resulting batch.
"""
import asyncio
import logging
from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from app.domains.market_data.services import MarketDataService, get_market_data_service
from ..config import ValuationConfig, get_valuation_config
from ..models.valuation import (
    CompanyInfo,
    DashboardReport,
    RateSummary,
    SortOrder,
    ValuationBatch,
    ValuationExclusion,
    ValuationOutcome,
)
from .chart import build_chart_series
from .dividends import summarize_dividends
from .group_statistics import classify_valuation, compute_group_statistics
from .ordering import order_valuations
from .rates import aggregate_treasury_rates
from .valuation import evaluate_valuation

logger = logging.getLogger(__name__)

Now = Optional[Union[datetime, date]]


class DashboardService:
    """Valuation pipeline behind the dashboard."""

    def __init__(
        self,
        market_data: Optional[MarketDataService] = None,
        config: Optional[ValuationConfig] = None
    ):
        self.market_data = market_data or get_market_data_service()
        self.config = config or get_valuation_config()

    async def load_rates(self) -> RateSummary:
        points = await self.market_data.get_treasury_rates()
        return aggregate_treasury_rates(points)

    async def value_ticker(self, ticker: str, interest_rate: float, now: Now = None) -> ValuationOutcome:
        earnings, outstanding_shares = await asyncio.gather(
            self.market_data.get_earnings(ticker),
            self.market_data.get_outstanding_shares(ticker),
        )
        return evaluate_valuation(ticker, earnings, interest_rate, outstanding_shares, now)

    async def load_valuations(self, tickers: Sequence[str], now: Now = None) -> ValuationBatch:
        """
        Value every ticker of a group.

        The aggregate rate is awaited before any ticker is valued. Results keep
        the order of `tickers` regardless of which fetch finishes first.
        """
        rates = await self.load_rates()
        logger.info(f"Loading valuations for {len(tickers)} tickers at rate {rates.average_rate:.4%}")

        results = await asyncio.gather(
            *(self.value_ticker(ticker, rates.average_rate, now) for ticker in tickers),
            return_exceptions=True
        )

        valuations = []
        exclusions = []
        for ticker, result in zip(tickers, results):
            if isinstance(result, Exception):
                logger.error(f"Error valuing {ticker}: {result}")
                continue
            if result.valuation is not None:
                valuations.append(result.valuation)
            else:
                exclusions.append(ValuationExclusion(ticker=ticker, reason=result.exclusion))

        logger.info(f"Valued {len(valuations)} of {len(tickers)} tickers")
        return ValuationBatch(rates=rates, valuations=valuations, exclusions=exclusions)

    def build_report(
        self,
        batch: ValuationBatch,
        percentage_range: Optional[float] = None,
        sort_order: SortOrder = SortOrder.NONE
    ) -> DashboardReport:
        if percentage_range is None:
            percentage_range = self.config.default_percentage_range

        statistics = None
        positions = {}
        if batch.valuations:
            statistics = compute_group_statistics(batch.valuations, percentage_range)
            positions = {v.ticker: classify_valuation(v, statistics) for v in batch.valuations}

        ordered = order_valuations(batch.valuations, sort_order)
        return DashboardReport(
            interest_rate=batch.interest_rate,
            percentage_range=percentage_range,
            sort_order=sort_order,
            valuations=ordered,
            positions=positions,
            statistics=statistics,
            exclusions=batch.exclusions,
            chart=build_chart_series(ordered, percentage_range),
        )

    async def get_report(
        self,
        tickers: Sequence[str],
        percentage_range: Optional[float] = None,
        sort_order: SortOrder = SortOrder.NONE,
        now: Now = None
    ) -> DashboardReport:
        batch = await self.load_valuations(tickers, now)
        return self.build_report(batch, percentage_range, sort_order)

    async def get_company_info(self, ticker: str, now: Now = None) -> CompanyInfo:
        profile, market_cap, dividend_events = await asyncio.gather(
            self.market_data.get_company_profile(ticker),
            self.market_data.get_market_cap(ticker),
            self.market_data.get_dividends(ticker),
        )
        dividends = summarize_dividends(
            dividend_events,
            now,
            trailing_events=self.config.trailing_dividend_events,
            window_days=self.config.dividend_frequency_window_days,
        )
        return CompanyInfo(ticker=ticker, profile=profile, market_cap=market_cap, dividends=dividends)


def get_dashboard_service() -> DashboardService:
    """Provides a DashboardService bound to the shared market data service."""
    return DashboardService()
