"""
Domains package for organizing business logic into clear, separated modules.

This package contains three domains:
- market_data: Financial Modeling Prep client, fail-soft data access and proxies
- valuation: Revenue / interest rate valuation, group statistics and dividends
- ticker_groups: Persisted, named lists of tickers shown on the dashboard
"""
