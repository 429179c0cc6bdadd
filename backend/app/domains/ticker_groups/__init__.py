"""
Ticker Groups Domain

Named, persisted lists of ticker symbols. One default group, seeded with the
canonical industrial tickers, always exists.
"""
