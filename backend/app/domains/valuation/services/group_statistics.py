"""Group average, tolerance bounds and per-ticker classification."""
from typing import Sequence, Union

from ..models.valuation import GroupStatistics, TickerValuation, ValuationPosition


def compute_group_statistics(
    valuations: Sequence[TickerValuation],
    percentage_range: float = 10.0
) -> GroupStatistics:
    """
    Average my_value over the group and the band of +/- percentage_range around it.

    Raises:
        ValueError: if valuations is empty; the statistics are undefined there
    """
    if not valuations:
        raise ValueError("Group statistics need at least one valuation")

    average = sum(v.my_value for v in valuations) / len(valuations)
    return GroupStatistics(
        average=average,
        upper_bound=average * (1 + percentage_range / 100),
        lower_bound=average * (1 - percentage_range / 100),
        percentage_range=percentage_range,
        count=len(valuations),
    )


def classify_valuation(
    valuation: Union[TickerValuation, float],
    statistics: GroupStatistics
) -> ValuationPosition:
    value = valuation.my_value if isinstance(valuation, TickerValuation) else valuation
    if value > statistics.upper_bound:
        return ValuationPosition.ABOVE_AVERAGE
    if value < statistics.lower_bound:
        return ValuationPosition.BELOW_AVERAGE
    return ValuationPosition.WITHIN_RANGE
