"""
Production FastAPI Application

Run with: python -m script.run_server
(granian src.main:app --interface asgi, host / port / workers from settings)
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config import di
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('[Seat Selection] Starting up...')

    tracing = TracingConfig(service_name='seat-selection-service')
    tracing.setup()
    Logger.base.info('[Seat Selection] OpenTelemetry tracing configured')

    di.setup()
    policy = di.container.adjacency_policy()
    Logger.base.info(
        f'[Seat Selection] Adjacency policy: max_distance={policy.max_distance}, '
        f'max_row_gap={policy.max_row_gap}, max_selection_size={policy.max_selection_size}, '
        f'reserved_blocks_selection={policy.reserved_blocks_selection}'
    )

    yield

    Logger.base.info('[Seat Selection] Shutting down...')
    di.cleanup()
    tracing.shutdown()


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
