from .fmp import (
    EarningsReport,
    TreasuryCurvePoint,
    SharesFloat,
    CompanyProfile,
    MarketCapSnapshot,
    DividendEvent,
    MATURITY_FIELDS,
)

__all__ = [
    "EarningsReport",
    "TreasuryCurvePoint",
    "SharesFloat",
    "CompanyProfile",
    "MarketCapSnapshot",
    "DividendEvent",
    "MATURITY_FIELDS",
]
