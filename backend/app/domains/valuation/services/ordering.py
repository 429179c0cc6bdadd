"""Display ordering of a valuation set."""
from typing import List, Sequence

from ..models.valuation import SortOrder, TickerValuation


def order_valuations(valuations: Sequence[TickerValuation], order: SortOrder = SortOrder.NONE) -> List[TickerValuation]:
    """
    Return a new list of valuations in the requested order.

    NONE keeps the arrival order. DESC and ASC sort by my_value; Python's sort
    is stable so equal values keep their arrival order. The input is not touched.
    """
    if order == SortOrder.NONE:
        return list(valuations)
    return sorted(valuations, key=lambda v: v.my_value, reverse=(order == SortOrder.DESC))
