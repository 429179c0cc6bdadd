"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import tempfile
from datetime import date
from pathlib import Path

# Keep the import-time engine away from the working directory
_TEST_DB_DIR = tempfile.mkdtemp(prefix="industrial-yield-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{Path(_TEST_DB_DIR) / 'app.db'}")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from app.db.base_class import Base
from app.db.session import create_db_engine
from app.domains.market_data.models import CompanyProfile, DividendEvent
from app.domains.ticker_groups.repositories import SqlGroupRepository
from app.domains.ticker_groups.services import TickerGroupService
from app.domains.valuation.config import ValuationConfig
from app.domains.valuation.services import DashboardService

from .factories import FakeMarketDataService, make_curve_point, make_earnings

# ===========================================================================
# Fixtures
# ===========================================================================


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "groups.db"


@pytest.fixture
def sync_engine(db_path: Path):
    """Plain sqlite engine on the test file, for creating tables and inspecting rows."""
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_path: Path, sync_engine):
    """Async session factory on the same file.

    NullPool opens a fresh aiosqlite connection per session, so the factory can
    be shared between pytest-asyncio tests and TestClient requests, which run
    on different event loops.
    """
    engine = create_db_engine(f"sqlite+aiosqlite:///{db_path}", echo=False, poolclass=NullPool)
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def group_repository(session_factory) -> SqlGroupRepository:
    return SqlGroupRepository(session_factory=session_factory)


@pytest.fixture
def group_service(group_repository) -> TickerGroupService:
    return TickerGroupService(group_repository)


@pytest.fixture
def current_year() -> int:
    return date.today().year


@pytest.fixture
def market_data(current_year: int) -> FakeMarketDataService:
    """Three valued tickers at a flat 5% curve plus one without shares."""
    return FakeMarketDataService(
        earnings={
            "CAT": make_earnings("CAT", current_year, [100.0, 100.0]),
            "GE": make_earnings("GE", current_year, [200.0]),
            "HON": make_earnings("HON", current_year, [300.0, 300.0, 300.0]),
            "BA": make_earnings("BA", current_year, [50.0]),
        },
        shares={"CAT": 1.0, "GE": 1.0, "HON": 1.0},
        treasury=[make_curve_point(5.0)],
        profiles={"CAT": CompanyProfile(symbol="CAT", company_name="Caterpillar Inc.", sector="Industrials")},
        market_caps={"CAT": 180_000_000_000.0},
        dividends={
            "CAT": [
                DividendEvent(date=f"{current_year}-04-21", dividend=1.41),
                DividendEvent(date=f"{current_year}-01-21", dividend=1.41),
            ]
        },
    )


@pytest.fixture
def dashboard_service(market_data: FakeMarketDataService) -> DashboardService:
    return DashboardService(market_data=market_data, config=ValuationConfig())


@pytest.fixture
def client(dashboard_service: DashboardService, group_service: TickerGroupService) -> TestClient:
    """TestClient with the dashboard and group services swapped for test doubles."""
    from app.domains.ticker_groups.services import get_group_service
    from app.domains.valuation.services import get_dashboard_service
    from app.main import app

    app.dependency_overrides[get_dashboard_service] = lambda: dashboard_service
    app.dependency_overrides[get_group_service] = lambda: group_service
    yield TestClient(app)
    app.dependency_overrides.clear()
