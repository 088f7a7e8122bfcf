"""
Production FastAPI Application

Run with: uvicorn src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Flight Booking] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Flight Booking] Dependency injection wired')

    # Bind the engine to the serving event loop
    get_engine()
    Logger.base.info('🗄️  [Flight Booking] Database engine ready')

    Logger.base.info('✅ [Flight Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Flight Booking] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Flight Booking] Database engine disposed')

    container.unwire()
    Logger.base.info('👋 [Flight Booking] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='Flight Booking System - flight search, user authentication and seat booking',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
