import logging
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi import APIRouter
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load environment variables from .env file in project root
project_root = Path(__file__).resolve().parents[2]
env_path = project_root / '.env'
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

from .config import get_settings

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

# Import API routers from each domain
from .db.init_db import init_db
from .db.session import engine
from .domains.market_data.api.proxy_endpoints import router as proxy_router
from .domains.market_data.clients import close_fmp_client
from .domains.valuation.api.public_endpoints import router as public_valuation_router
from .domains.ticker_groups.api.group_endpoints import router as ticker_group_router
from .shared.exceptions import DomainException, domain_exception_to_http_exception
from .shared.response_models import HealthCheckResponse, StatusEnum


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("Database tables ready")
    yield
    await close_fmp_client()
    await engine.dispose()


app = FastAPI(
    title="Industrial Yield API",
    description="Revenue / interest rate valuation of industrial stocks against the treasury curve.",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origin_list,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
    max_age=86400,
)


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException):
    http_exception = domain_exception_to_http_exception(exc)
    logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=http_exception.status_code, content=http_exception.detail)


# Create a main API router to group all versioned endpoints
api_router = APIRouter()

# Routers for each domain
api_router.include_router(public_valuation_router, prefix="/valuation", tags=["Valuation"])
api_router.include_router(ticker_group_router, prefix="/groups", tags=["Ticker Groups"])

app.include_router(api_router, prefix="/api/v1")

# Same-origin proxies keep the upstream key on the server
app.include_router(proxy_router, prefix="/api", tags=["Market Data Proxy"])


@app.get("/")
async def read_root():
    return {
        "message": "Welcome to Industrial Yield API",
        "version": "0.1.0",
        "api_structure": {
            "public_api": {
                "description": "Dashboard endpoints",
                "base_url": "/api/v1",
                "endpoints": {
                    "dashboard": "GET /api/v1/valuation/dashboard - Group valuation report",
                    "treasury_rate": "GET /api/v1/valuation/treasury-rate - Average treasury rate",
                    "company": "GET /api/v1/valuation/company/{ticker} - Profile and dividends",
                    "groups": "GET|POST /api/v1/groups - Ticker groups"
                }
            },
            "proxy_api": {
                "description": "Upstream JSON returned verbatim",
                "base_url": "/api",
                "endpoints": ["earnings", "shares", "treasury", "profile", "market-cap", "dividends"]
            }
        },
        "documentation": {
            "full_api": "/docs - Swagger UI"
        }
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health_check():
    key_configured = bool(get_settings().fmp_api_key)
    return HealthCheckResponse(
        status=StatusEnum.SUCCESS if key_configured else StatusEnum.DEGRADED,
        service_name="industrial-yield-api",
        version="0.1.0",
        dependencies={"fmp_api_key": "configured" if key_configured else "missing"},
    )
