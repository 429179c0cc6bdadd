from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..config import CANONICAL_TICKERS, DEFAULT_GROUP_NAME


class TickerGroup(BaseModel):
    # Stored as {"name", "tickers", "isDefault"}
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    tickers: List[str] = Field(default_factory=list)
    is_default: bool = False

    @field_validator('tickers')
    @classmethod
    def _unique_tickers(cls, tickers: List[str]) -> List[str]:
        seen = set()
        unique = []
        for ticker in tickers:
            if ticker not in seen:
                seen.add(ticker)
                unique.append(ticker)
        return unique


class GroupSet(BaseModel):
    """All groups plus the one currently shown."""
    groups: List[TickerGroup] = Field(default_factory=list)
    active_index: int = 0

    @property
    def default_group(self) -> TickerGroup:
        return next(group for group in self.groups if group.is_default)


def canonical_default_group() -> TickerGroup:
    return TickerGroup(name=DEFAULT_GROUP_NAME, tickers=list(CANONICAL_TICKERS), is_default=True)


class GroupCreate(BaseModel):
    name: str


class TickerAdd(BaseModel):
    ticker: str
