from .valuation import (
    RateSummary,
    TickerValuation,
    ExclusionReason,
    ValuationExclusion,
    ValuationOutcome,
    ValuationPosition,
    GroupStatistics,
    SortOrder,
    DividendFrequency,
    DividendSummary,
    ChartPoint,
    ValuationBatch,
    DashboardReport,
    CompanyInfo,
)

__all__ = [
    "RateSummary",
    "TickerValuation",
    "ExclusionReason",
    "ValuationExclusion",
    "ValuationOutcome",
    "ValuationPosition",
    "GroupStatistics",
    "SortOrder",
    "DividendFrequency",
    "DividendSummary",
    "ChartPoint",
    "ValuationBatch",
    "DashboardReport",
    "CompanyInfo",
]
