"""Series behind the valuation comparison charts."""
from typing import List, Sequence

from ..models.valuation import ChartPoint, TickerValuation


def build_chart_series(valuations: Sequence[TickerValuation], percentage_range: float) -> List[ChartPoint]:
    """One point per valuation with its own +/- percentage_range band, rounded to cents."""
    return [
        ChartPoint(
            ticker=v.ticker,
            value=round(v.my_value, 2),
            upper=round(v.my_value * (1 + percentage_range / 100), 2),
            lower=round(v.my_value * (1 - percentage_range / 100), 2),
            ytd_revenue=round(v.ytd_revenue, 2),
        )
        for v in valuations
    ]
