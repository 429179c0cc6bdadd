# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# Third-party imports
import httpx
from pydantic import ValidationError, TypeAdapter, BaseModel

# App imports
from app.config import get_settings
from app.shared.exceptions import APIKeyMissingException, DataSourceException
from ..models.fmp import (
    EarningsReport,
    TreasuryCurvePoint,
    SharesFloat,
    CompanyProfile,
    MarketCapSnapshot,
    DividendEvent,
    EarningsListAdapter,
    TreasuryListAdapter,
    SharesFloatListAdapter,
    CompanyProfileListAdapter,
    MarketCapListAdapter,
    DividendListAdapter,
)

logger = logging.getLogger(__name__)

# Proxy resource name -> FMP stable endpoint
FMP_RESOURCE_ENDPOINTS = {
    "earnings": "earnings",
    "shares": "shares-float",
    "treasury": "treasury-rates",
    "profile": "profile",
    "market-cap": "market-capitalization",
    "dividends": "dividends",
}


class FMPClient:
    _client: httpx.AsyncClient

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.api_key = api_key or settings.fmp_api_key
        if not self.api_key:
            raise APIKeyMissingException("Financial Modeling Prep", "FMP_API_KEY")
        self.base_url = (base_url or settings.fmp_base_url).rstrip('/')
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or settings.fmp_timeout_seconds,
            transport=transport,
        )

    async def close(self):
        """Closes the underlying httpx client."""
        await self._client.aclose()

    async def __aenter__(self) -> "FMPClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def fetch_resource(self, resource: str, symbol: Optional[str] = None) -> Any:
        """
        Fetch one proxy resource and return the upstream JSON body untouched.

        Raises:
            DataSourceException: on transport errors, non-2xx answers or a non-JSON body
        """
        endpoint = FMP_RESOURCE_ENDPOINTS[resource]
        params = {"symbol": symbol} if symbol else None
        return await self._request_json(endpoint, params=params)

    async def _request_json(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        all_params = {**(params or {}), "apikey": self.api_key}

        try:
            response = await self._client.get(f"/{endpoint}", params=all_params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error for endpoint {endpoint}: {e.response.status_code}")
            raise DataSourceException("fmp", f"HTTP {e.response.status_code} from {endpoint}") from e
        except httpx.RequestError as e:
            logger.error(f"Request error for endpoint {endpoint}: {e}")
            raise DataSourceException("fmp", f"request to {endpoint} failed") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from endpoint {endpoint}: {e}")
            raise DataSourceException("fmp", f"invalid JSON from {endpoint}") from e

    async def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Optional[List[Dict]]:
        try:
            data = await self._request_json(endpoint, params=params)
        except DataSourceException:
            return None

        # Handle API errors
        if isinstance(data, dict) and "Error Message" in data:
            logger.error(f"FMP error for endpoint {endpoint}: {data['Error Message']}")
            return None

        # Handle empty responses
        if isinstance(data, list) and not data:
            return []

        # Handle unexpected response format
        if not isinstance(data, list):
            logger.error(f"Unexpected response format for endpoint {endpoint}: {type(data).__name__}")
            return None

        return data

    async def _fetch_validated(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]],
        list_adapter: TypeAdapter,
        model_name: str,
        symbol: Optional[str] = None
    ) -> Optional[List[BaseModel]]:
        api_data_list = await self._make_request(endpoint, params=params)
        if api_data_list is None:
            return None
        if not api_data_list:
            return []
        try:
            return list_adapter.validate_python(api_data_list)
        except ValidationError as e:
            logger.error(f"Invalid {model_name} payload for {symbol or 'market'}: {e.error_count()} errors")
            return None

    async def get_earnings(self, symbol: str) -> Optional[List[EarningsReport]]:
        """Fetches the earnings history (most recent first) for a stock symbol."""
        return await self._fetch_validated(
            FMP_RESOURCE_ENDPOINTS["earnings"],
            {"symbol": symbol},
            EarningsListAdapter,
            "earnings",
            symbol,
        )

    async def get_shares_float(self, symbol: str) -> Optional[List[SharesFloat]]:
        return await self._fetch_validated(
            FMP_RESOURCE_ENDPOINTS["shares"],
            {"symbol": symbol},
            SharesFloatListAdapter,
            "shares float",
            symbol,
        )

    async def get_treasury_rates(self) -> Optional[List[TreasuryCurvePoint]]:
        """Fetches treasury yield curve points, most recent observation first."""
        return await self._fetch_validated(
            FMP_RESOURCE_ENDPOINTS["treasury"],
            None,
            TreasuryListAdapter,
            "treasury rates",
        )

    async def get_profile(self, symbol: str) -> Optional[List[CompanyProfile]]:
        return await self._fetch_validated(
            FMP_RESOURCE_ENDPOINTS["profile"],
            {"symbol": symbol},
            CompanyProfileListAdapter,
            "company profile",
            symbol,
        )

    async def get_market_cap(self, symbol: str) -> Optional[List[MarketCapSnapshot]]:
        return await self._fetch_validated(
            FMP_RESOURCE_ENDPOINTS["market-cap"],
            {"symbol": symbol},
            MarketCapListAdapter,
            "market cap",
            symbol,
        )

    async def get_dividends(self, symbol: str) -> Optional[List[DividendEvent]]:
        """Fetches dividend events (most recent first) for a stock symbol."""
        return await self._fetch_validated(
            FMP_RESOURCE_ENDPOINTS["dividends"],
            {"symbol": symbol},
            DividendListAdapter,
            "dividends",
            symbol,
        )


from app.shared.singleton import get_singleton, pop_singleton


def get_fmp_client() -> "FMPClient":
    """Provides a singleton instance of the FMPClient."""
    return get_singleton(FMPClient)


async def close_fmp_client() -> None:
    """Close the shared FMPClient, if one was created."""
    client = pop_singleton(FMPClient)
    if client is not None:
        await client.close()
        logger.info("Closed shared FMP client")
