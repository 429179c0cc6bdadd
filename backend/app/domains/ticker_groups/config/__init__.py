"""
Ticker Groups Configuration

The canonical default group and the storage key the group set lives under.
"""

# Storage key holding the serialized array of groups
GROUPS_STORAGE_KEY = "financial-dashboard-groups"

DEFAULT_GROUP_NAME = "Top 20 Industrial Stocks"

# Leading industrial stocks; the default group always contains all of them
CANONICAL_TICKERS = (
    "GE", "RTX", "CAT", "BA", "GEV",
    "HON", "ETN", "UNP", "DE", "LMT",
    "PH", "TT", "WM", "GD", "NOC",
    "RELX", "CTAS", "MMM", "TRI", "ITW",
)

__all__ = [
    "GROUPS_STORAGE_KEY",
    "DEFAULT_GROUP_NAME",
    "CANONICAL_TICKERS",
]
