from .ticker_group import TickerGroup, GroupSet, GroupCreate, TickerAdd, canonical_default_group
from .storage import StorageEntry

__all__ = [
    "TickerGroup",
    "GroupSet",
    "GroupCreate",
    "TickerAdd",
    "canonical_default_group",
    "StorageEntry",
]
