"""
SQLAlchemy async engine and session management

This module provides:
1. AsyncEngineManager: one engine per running event loop
2. Base: declarative base for all ORM models
3. Database class (for dependency injection)

The API worker, the test client portal and pytest-asyncio each run their own
event loop; an engine bound to another loop fails with "attached to a
different loop", so the manager rebuilds the engine when the loop changes.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from room_reservation.platform.config.core_setting import settings
from room_reservation.platform.database.unit_of_work import SERIALIZABLE
from room_reservation.platform.logging.loguru_io import Logger


# =============================================================================
# SQLite transaction control
# =============================================================================


def enable_sqlite_immediate_transactions(engine: AsyncEngine) -> None:
    """
    Let SQLAlchemy emit BEGIN itself instead of the sqlite3 driver.

    The driver defers BEGIN until the first write, so two serializable
    transactions can both read before either takes a lock. A SERIALIZABLE
    connection starts with BEGIN IMMEDIATE, which takes the write lock up front
    and makes concurrent approvals run one after the other.

    https://docs.sqlalchemy.org/en/20/dialects/sqlite.html#serializable-isolation-savepoints-transactional-ddl
    """

    @event.listens_for(engine.sync_engine, 'connect')
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, 'begin')
    def _begin(conn):
        isolation_level = conn.get_execution_options().get('isolation_level')
        conn.exec_driver_sql('BEGIN IMMEDIATE' if isolation_level == SERIALIZABLE else 'BEGIN')


# =============================================================================
# Event-loop-aware Engine Manager
# =============================================================================


class AsyncEngineManager:
    def __init__(self) -> None:
        self._engine: Optional[AsyncEngine] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    def get_engine(self) -> AsyncEngine:
        """Get engine for current event loop, creating new one if needed"""
        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop running, create engine without loop tracking
            if self._engine is None:
                self._engine = self._create_engine()
            return self._engine

        if self._loop is not current_loop:
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, replacing engine...')
                # dispose() is a coroutine bound to the old loop; let GC collect it
                self._session_maker = None

            Logger.base.info(f'🔗 [DB] Creating engine for event loop {id(current_loop)}')
            self._engine = self._create_engine()
            self._loop = current_loop

        assert self._engine is not None
        return self._engine

    def get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        """Get session maker for current event loop"""
        engine = self.get_engine()
        if self._session_maker is None:
            self._session_maker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_maker

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        self._loop = None

    @staticmethod
    def _create_engine() -> AsyncEngine:
        """
        Create new async engine.

        Pool tuning only applies to PostgreSQL; SQLite picks its own pool class.
        """
        pool_options: dict[str, Any] = {}
        if settings.IS_POSTGRES:
            pool_options = {
                'pool_size': settings.DB_POOL_SIZE,
                'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
                'pool_timeout': settings.DB_POOL_TIMEOUT,
                'pool_recycle': settings.DB_POOL_RECYCLE,
                'pool_pre_ping': settings.DB_POOL_PRE_PING,
            }
        engine = create_async_engine(settings.DATABASE_URL_ASYNC, echo=False, **pool_options)
        if engine.dialect.name == 'sqlite':
            enable_sqlite_immediate_transactions(engine)
        return engine


# Global engine manager
_engine_manager = AsyncEngineManager()


def get_engine() -> AsyncEngine:
    return _engine_manager.get_engine()


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return _engine_manager.get_session_maker()


async def dispose_engine() -> None:
    await _engine_manager.dispose()


# =============================================================================
# Base Model
# =============================================================================


class Base(DeclarativeBase):
    pass


# =============================================================================
# Table Creation
# =============================================================================


async def create_db_and_tables() -> None:
    """Create database tables if they don't exist"""
    # Import models so they register on Base.metadata
    import room_reservation.service.reservation.driven_adapter.model.reservation_model  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)


# =============================================================================
# Database Class (for DI)
# =============================================================================


class Database:
    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with get_session_maker()() as session:
            yield session
