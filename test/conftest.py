"""
Test Configuration and Fixtures

This module provides:
- Test database (a temporary sqlite file per test process) set up before any import
- Table cleanup for integration tests
- Session-scoped TestClient and seeded flight fixtures

Architecture:
- Unit tests (test/**/unit/): Override fixtures with no-ops in their own conftest.py
- Integration tests: Use the real schema on sqlite with cleanup between tests
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings read DATABASE_URL and TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    # One database file per process (pytest-xdist workers do not share it)
    test_db_dir = Path(tempfile.mkdtemp(prefix='flight_booking_test_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_db_dir / "test.db"}'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('SECRET_KEY', 'test_secret_key_with_at_least_32_bytes_for_hs256')
    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.database.orm_db_setting import Base, _import_models  # noqa: E402
from src.service.flight_booking.app.command.seed_flights_use_case import (  # noqa: E402
    SeedFlightsUseCase,
)
from src.service.flight_booking.driven_adapter.repo.flight_command_repo_impl import (  # noqa: E402
    FlightCommandRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.flight_query_repo_impl import (  # noqa: E402
    FlightQueryRepoImpl,
)
from test.constants import SEED_FLIGHT_RECORDS  # noqa: E402


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Cleanup
# =============================================================================
async def _reset_all_tables() -> None:
    # Own engine: the application engine belongs to the TestClient event loop
    _import_models()
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
            for table in reversed(Base.metadata.sorted_tables):
                await conn.execute(table.delete())
    finally:
        await engine.dispose()


@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _reset_all_tables()
    yield


@pytest.fixture
async def session_maker() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Session maker on a private engine bound to the test's event loop."""
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    finally:
        await engine.dispose()


# =============================================================================
# Flight Fixtures
# =============================================================================
@pytest.fixture
async def seeded_flights(
    clean_database: None, session_maker: async_sessionmaker[AsyncSession]
) -> dict[str, dict[str, Any]]:
    """
    Seed the standard catalogue and return it keyed by flight number.

    Each value holds the stored ``id``, ``price`` and ``available_seats``.
    """
    await SeedFlightsUseCase(
        flight_command_repo=FlightCommandRepoImpl(session_factory=session_maker)
    ).seed(records=SEED_FLIGHT_RECORDS)

    query_repo = FlightQueryRepoImpl(session_factory=session_maker)
    flights: dict[str, dict[str, Any]] = {}
    for origin, destination in {(r['origin'], r['destination']) for r in SEED_FLIGHT_RECORDS}:
        for flight in await query_repo.search(
            origin=origin,
            destination=destination,
            departure_date=None,
            min_available_seats=0,
            sort='price',
            limit=100,
            offset=0,
        ):
            flights[flight.flight_number] = {
                'id': flight.id,
                'price': flight.price,
                'available_seats': flight.available_seats,
            }
    return flights


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
