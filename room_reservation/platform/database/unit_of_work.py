"""
Unit of Work Pattern - owns the database session and the repositories bound to it

Architecture:
- UoW manages the session lifecycle and the transaction isolation level
- UoW handles commit/rollback; leaving the block without commit rolls back
- The reservation store is created per UoW on the shared session
- Use cases coordinate store calls through the UoW
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager, AsyncExitStack
from typing import TYPE_CHECKING, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from room_reservation.service.reservation.app.interface.i_reservation_store import (
        IReservationStore,
    )


SERIALIZABLE = 'SERIALIZABLE'


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the Reservation Service

    Usage:
        async with uow:
            reservation = await uow.reservation_store.save(reservation=...)
            await uow.commit()
    """

    reservation_store: IReservationStore

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    Args:
        session_factory: callable returning an async context manager that yields a session
            (an `async_sessionmaker` or `Database.session`)
        isolation_level: transaction isolation applied to the session's connection,
            e.g. 'SERIALIZABLE' for read-check-write sequences (BEGIN IMMEDIATE on SQLite)
    """

    def __init__(
        self,
        session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]],
        *,
        isolation_level: Optional[str] = None,
    ) -> None:
        self.session_factory = session_factory
        self.isolation_level = isolation_level
        self._exit_stack: Optional[AsyncExitStack] = None
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> AbstractUnitOfWork:
        from room_reservation.service.reservation.driven_adapter.repo.reservation_store_impl import (
            ReservationStoreImpl,
        )

        self._exit_stack = AsyncExitStack()
        self.session = await self._exit_stack.enter_async_context(self.session_factory())
        if self.isolation_level:
            # Must run before the first statement so the whole transaction uses it
            await self.session.connection(
                execution_options={'isolation_level': self.isolation_level}
            )

        self.reservation_store = ReservationStoreImpl(session=self.session)
        return await super().__aenter__()

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._exit_stack is not None:
                await self._exit_stack.aclose()
            self._exit_stack = None
            self.session = None

    async def _commit(self) -> None:
        assert self.session is not None, 'UnitOfWork used outside of its context'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
