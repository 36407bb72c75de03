"""
Room Reservation Service - Main Application
Handles reservation creation, rescheduling, cancellation and approval.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from room_reservation.platform.app_factory import create_app
from room_reservation.platform.config.di import container
from room_reservation.platform.config.wire_modules import WIRE_MODULES
from room_reservation.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from room_reservation.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Manage application lifespan: startup and shutdown"""
    Logger.base.info('🚀 [Reservation Service] Starting up...')

    await create_db_and_tables()
    Logger.base.info('🗄️ [Reservation Service] Database tables ready')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Reservation Service] Dependency injection wired')

    Logger.base.info('✅ [Reservation Service] Startup complete')

    yield

    Logger.base.info('🛑 [Reservation Service] Shutting down...')

    container.unwire()
    await dispose_engine()

    Logger.base.info('👋 [Reservation Service] Shutdown complete')


app = create_app(lifespan=lifespan)
