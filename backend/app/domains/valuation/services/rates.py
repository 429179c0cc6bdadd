"""Treasury yield curve -> single fractional interest rate."""
import logging
from typing import Sequence

from app.domains.market_data.models import TreasuryCurvePoint
from ..models.valuation import RateSummary

logger = logging.getLogger(__name__)


def aggregate_treasury_rates(points: Sequence[TreasuryCurvePoint]) -> RateSummary:
    """
    Average the twelve maturities of the most recent curve point.

    Args:
        points: Curve points, most recent observation first. An empty sequence
            (including a failed fetch) is a valid, degraded input.

    Returns:
        RateSummary whose average_rate is a fraction (4.33% -> 0.0433), or 0.0
        when there are no points.
    """
    if not points:
        logger.warning("No treasury rates available, using an interest rate of 0")
        return RateSummary(points=[], average_rate=0.0)

    rates = points[0].maturity_rates()
    average_rate = sum(rates) / len(rates) / 100
    return RateSummary(points=list(points), average_rate=average_rate)
