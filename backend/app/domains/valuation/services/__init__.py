"""
Valuation Services

Core calculations for the revenue / interest rate valuation and the dashboard
pipeline built on them.
"""

from .rates import aggregate_treasury_rates
from .valuation import calculate_valuation, evaluate_valuation, ytd_reports
from .group_statistics import compute_group_statistics, classify_valuation
from .ordering import order_valuations
from .dividends import summarize_dividends, classify_dividend_frequency
from .chart import build_chart_series
from .dashboard_service import DashboardService, get_dashboard_service

__all__ = [
    # Core calculations
    "aggregate_treasury_rates",
    "calculate_valuation",
    "evaluate_valuation",
    "ytd_reports",
    "compute_group_statistics",
    "classify_valuation",
    "order_valuations",
    "summarize_dividends",
    "classify_dividend_frequency",
    "build_chart_series",

    # Pipeline
    "DashboardService",
    "get_dashboard_service",
]
