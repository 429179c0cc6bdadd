from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional
from pydantic import TypeAdapter

# Note: Fields are marked Optional as API responses might vary.
# Configure models to handle camelCase input from the API.

_fmp_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore', frozen=True)


class EarningsReport(BaseModel):
    model_config = _fmp_config

    symbol: str
    date: str  # report date
    revenue_actual: Optional[float] = None
    revenue_estimated: Optional[float] = None
    eps_actual: Optional[float] = None
    eps_estimated: Optional[float] = None


MATURITY_FIELDS = (
    "month1", "month2", "month3", "month6",
    "year1", "year2", "year3", "year5",
    "year7", "year10", "year20", "year30",
)


class TreasuryCurvePoint(BaseModel):
    model_config = _fmp_config

    date: str  # observation date
    # Percentages as quoted by the Treasury, e.g. 4.33 means 4.33%
    month1: Optional[float] = None
    month2: Optional[float] = None
    month3: Optional[float] = None
    month6: Optional[float] = None
    year1: Optional[float] = None
    year2: Optional[float] = None
    year3: Optional[float] = None
    year5: Optional[float] = None
    year7: Optional[float] = None
    year10: Optional[float] = None
    year20: Optional[float] = None
    year30: Optional[float] = None

    def maturity_rates(self) -> List[float]:
        # A maturity the Treasury did not quote counts as zero
        return [getattr(self, field) or 0.0 for field in MATURITY_FIELDS]


class SharesFloat(BaseModel):
    model_config = _fmp_config

    symbol: str
    date: Optional[str] = None
    free_float: Optional[float] = None
    float_shares: Optional[float] = None
    outstanding_shares: Optional[float] = None
    source: Optional[str] = None


class CompanyProfile(BaseModel):
    model_config = _fmp_config

    symbol: str
    company_name: Optional[str] = None
    # The stable API says "exchange", the legacy v3 API "exchangeShortName"
    exchange: Optional[str] = Field(None, validation_alias=AliasChoices('exchange', 'exchangeShortName'))
    description: Optional[str] = None
    website: Optional[str] = None
    country: Optional[str] = None
    sector: Optional[str] = None
    full_time_employees: Optional[int] = None

    @field_validator('full_time_employees', mode='before')
    @classmethod
    def _blank_employees(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class MarketCapSnapshot(BaseModel):
    model_config = _fmp_config

    symbol: str
    date: Optional[str] = None
    market_cap: Optional[float] = None


class DividendEvent(BaseModel):
    model_config = _fmp_config

    date: str
    label: Optional[str] = None
    dividend: Optional[float] = None
    adj_dividend: Optional[float] = None
    record_date: Optional[str] = None
    payment_date: Optional[str] = None
    declaration_date: Optional[str] = None


# Define TypeAdapters for lists of models for efficient validation
EarningsListAdapter = TypeAdapter(List[EarningsReport])
TreasuryListAdapter = TypeAdapter(List[TreasuryCurvePoint])
SharesFloatListAdapter = TypeAdapter(List[SharesFloat])
CompanyProfileListAdapter = TypeAdapter(List[CompanyProfile])
MarketCapListAdapter = TypeAdapter(List[MarketCapSnapshot])
DividendListAdapter = TypeAdapter(List[DividendEvent])
