"""
FastAPI App Factory

Shared app setup for the service entrypoint and the API tests.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from room_reservation.platform.config.core_setting import settings
from room_reservation.platform.constant.route_constant import HEALTH, RESERVATION_BASE
from room_reservation.platform.exception.exception_handlers import register_exception_handlers
from room_reservation.service.reservation.driving_adapter.http_controller.reservation_controller import (
    router as reservation_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description='Room reservation lifecycle with approval conflict detection',
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(reservation_router, prefix=RESERVATION_BASE, tags=['reservation'])

    _register_health_endpoint(app)

    return app


def _register_health_endpoint(app: FastAPI) -> None:
    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}
