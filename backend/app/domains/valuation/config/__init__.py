"""
Valuation Domain Configuration

Configuration settings and constants for the revenue / interest rate valuation.
"""

# Third-party imports
from pydantic import BaseModel, Field

# App imports
from app.config import get_settings
from ..models.valuation import DividendFrequency


class ValuationConfig(BaseModel):
    """Configuration for the valuation domain."""

    # Tolerance band around the group average, in percent
    default_percentage_range: float = Field(default=10.0)

    # Number of most recent dividend events summed into the trailing total
    trailing_dividend_events: int = Field(default=4)

    # Window, in days, used to classify dividend frequency
    dividend_frequency_window_days: int = Field(default=365)


def get_valuation_config() -> ValuationConfig:
    """Build the valuation configuration from the current settings."""
    settings = get_settings()
    return ValuationConfig(default_percentage_range=settings.default_percentage_range)


# Events in the trailing window -> frequency label, checked top to bottom
DIVIDEND_FREQUENCY_THRESHOLDS = (
    (12, DividendFrequency.MONTHLY),
    (4, DividendFrequency.QUARTERLY),
    (2, DividendFrequency.SEMI_ANNUAL),
    (1, DividendFrequency.ANNUAL),
)


__all__ = [
    "ValuationConfig",
    "get_valuation_config",
    "DIVIDEND_FREQUENCY_THRESHOLDS",
]
