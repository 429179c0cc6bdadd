"""
Market Data Services

Fail-soft, typed access to the upstream provider for the valuation core.
"""

from .market_data_service import MarketDataService, get_market_data_service

__all__ = [
    "MarketDataService",
    "get_market_data_service",
]
