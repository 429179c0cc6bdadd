"""
Market Data Proxy Endpoints

Same-origin proxies in front of Financial Modeling Prep. The server holds the
API key; the upstream JSON body is returned verbatim.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.shared.exceptions import APIKeyMissingException, DataSourceException
from ..clients.fmp_client import FMPClient, get_fmp_client

logger = logging.getLogger(__name__)

router = APIRouter()


def get_proxy_client() -> Optional[FMPClient]:
    """FMP client for the proxies, or None when no API key is configured."""
    try:
        return get_fmp_client()
    except APIKeyMissingException:
        return None


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def _proxy(
    resource: str,
    label: str,
    client: Optional[FMPClient],
    symbol: Optional[str] = None,
    symbol_required: bool = True,
) -> JSONResponse:
    if symbol_required:
        symbol = (symbol or "").strip()
        if not symbol:
            return _error("Symbol is required", 400)

    if client is None:
        return _error("API key not configured", 500)

    try:
        data = await client.fetch_resource(resource, symbol if symbol_required else None)
    except DataSourceException as e:
        logger.error(f"Error fetching {label} for {symbol or 'market'}: {e.message}")
        return _error(f"Failed to fetch {label}", 500)

    return JSONResponse(data)


@router.get("/earnings")
async def proxy_earnings(
    symbol: Optional[str] = Query(None, description="Ticker symbol, e.g. CAT"),
    client: Optional[FMPClient] = Depends(get_proxy_client),
):
    return await _proxy("earnings", "earnings data", client, symbol)


@router.get("/shares")
async def proxy_shares(
    symbol: Optional[str] = Query(None, description="Ticker symbol, e.g. CAT"),
    client: Optional[FMPClient] = Depends(get_proxy_client),
):
    return await _proxy("shares", "shares data", client, symbol)


@router.get("/treasury")
async def proxy_treasury(client: Optional[FMPClient] = Depends(get_proxy_client)):
    return await _proxy("treasury", "treasury rates", client, symbol_required=False)


@router.get("/profile")
async def proxy_profile(
    symbol: Optional[str] = Query(None, description="Ticker symbol, e.g. CAT"),
    client: Optional[FMPClient] = Depends(get_proxy_client),
):
    return await _proxy("profile", "profile data", client, symbol)


@router.get("/market-cap")
async def proxy_market_cap(
    symbol: Optional[str] = Query(None, description="Ticker symbol, e.g. CAT"),
    client: Optional[FMPClient] = Depends(get_proxy_client),
):
    return await _proxy("market-cap", "market cap data", client, symbol)


@router.get("/dividends")
async def proxy_dividends(
    symbol: Optional[str] = Query(None, description="Ticker symbol, e.g. CAT"),
    client: Optional[FMPClient] = Depends(get_proxy_client),
):
    return await _proxy("dividends", "dividend data", client, symbol)
