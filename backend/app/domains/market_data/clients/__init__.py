# This file makes the 'clients' directory a Python package.
from .fmp_client import FMPClient, get_fmp_client, close_fmp_client, FMP_RESOURCE_ENDPOINTS

__all__ = [
    "FMPClient",
    "get_fmp_client",
    "close_fmp_client",
    "FMP_RESOURCE_ENDPOINTS",
]
