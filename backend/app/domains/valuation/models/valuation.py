"""
Valuation Models

Records produced by the valuation core. All of them are immutable; a new set
is built on every load cycle.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.domains.market_data.models import CompanyProfile, DividendEvent, TreasuryCurvePoint


class RateSummary(BaseModel):
    """Most recent treasury curve reduced to one fractional rate."""
    model_config = ConfigDict(frozen=True)

    points: List[TreasuryCurvePoint] = Field(default_factory=list)
    average_rate: float = 0.0


class TickerValuation(BaseModel):
    """
    Revenue / interest rate valuation of one ticker.

    quarterly_revenue = ytd_revenue / quarters_reported
    my_value = quarterly_revenue / outstanding_shares * interest_rate
    """
    model_config = ConfigDict(frozen=True)

    ticker: str
    ytd_revenue: float
    quarterly_revenue: float
    interest_rate: float
    outstanding_shares: float
    my_value: float
    quarters_reported: int


class ExclusionReason(str, Enum):
    """Why a ticker produced no valuation."""
    NO_YTD_REVENUE = "no_ytd_revenue"
    NO_OUTSTANDING_SHARES = "no_outstanding_shares"


class ValuationExclusion(BaseModel):
    model_config = ConfigDict(frozen=True)

    ticker: str
    reason: ExclusionReason


class ValuationOutcome(BaseModel):
    """Either a valuation or the reason there is none."""
    model_config = ConfigDict(frozen=True)

    ticker: str
    valuation: Optional[TickerValuation] = None
    exclusion: Optional[ExclusionReason] = None


class ValuationPosition(str, Enum):
    """Where a valuation sits against the group bounds."""
    ABOVE_AVERAGE = "above_average"
    BELOW_AVERAGE = "below_average"
    WITHIN_RANGE = "within_range"


class GroupStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    average: float
    upper_bound: float
    lower_bound: float
    percentage_range: float
    count: int


class SortOrder(str, Enum):
    """Display order of the valuation set; toggled NONE -> DESC -> ASC -> NONE."""
    NONE = "none"
    DESC = "desc"
    ASC = "asc"

    def next(self) -> "SortOrder":
        return _NEXT_SORT_ORDER[self]


_NEXT_SORT_ORDER = {
    SortOrder.NONE: SortOrder.DESC,
    SortOrder.DESC: SortOrder.ASC,
    SortOrder.ASC: SortOrder.NONE,
}


class DividendFrequency(str, Enum):
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    SEMI_ANNUAL = "Semi-Annual"
    ANNUAL = "Annual"


class DividendSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    latest_dividend: Optional[DividendEvent] = None
    # Sum of the most recent dividend amounts, not a price-relative yield.
    # The name is kept for compatibility with existing dashboard clients.
    annual_yield: Optional[float] = None
    frequency: Optional[DividendFrequency] = None

    @computed_field
    @property
    def trailing_dividend_total(self) -> Optional[float]:
        return self.annual_yield


class ChartPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    ticker: str
    value: float
    upper: float
    lower: float
    ytd_revenue: float


class ValuationBatch(BaseModel):
    """Result of one load cycle, in the order of the originating ticker list."""
    model_config = ConfigDict(frozen=True)

    rates: RateSummary
    valuations: List[TickerValuation] = Field(default_factory=list)
    exclusions: List[ValuationExclusion] = Field(default_factory=list)

    @property
    def interest_rate(self) -> float:
        return self.rates.average_rate


class DashboardReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    interest_rate: float
    percentage_range: float
    sort_order: SortOrder
    valuations: List[TickerValuation]
    positions: Dict[str, ValuationPosition] = Field(default_factory=dict)
    statistics: Optional[GroupStatistics] = None
    exclusions: List[ValuationExclusion] = Field(default_factory=list)
    chart: List[ChartPoint] = Field(default_factory=list)


class CompanyInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    ticker: str
    profile: Optional[CompanyProfile] = None
    market_cap: Optional[float] = None
    dividends: DividendSummary = Field(default_factory=DividendSummary)
