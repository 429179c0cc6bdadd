"""
Market Data Domain

Boundary to the upstream financial data provider (Financial Modeling Prep).
Includes the HTTP client, typed provider records, the fail-soft data service
and the same-origin proxy endpoints.
"""
