from datetime import date
from typing import Callable, Optional
from unittest.mock import AsyncMock

import pytest

from room_reservation.platform.database.unit_of_work import AbstractUnitOfWork
from room_reservation.service.reservation.app.interface.i_reservation_store import (
    IReservationStore,
)
from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation
from room_reservation.service.reservation.domain.enum.reservation_status import (
    ReservationStatus,
)


class FakeUnitOfWork(AbstractUnitOfWork):
    """In-memory unit of work around a mocked reservation store."""

    def __init__(self, reservation_store: AsyncMock) -> None:
        self.reservation_store = reservation_store
        self.committed = False
        self.rolled_back = False

    async def _commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True


@pytest.fixture
def mock_reservation_store() -> AsyncMock:
    store = AsyncMock(spec=IReservationStore)
    store.find_conflicting = AsyncMock(return_value=[])
    store.save = AsyncMock(side_effect=lambda *, reservation: reservation)
    return store


@pytest.fixture
def fake_uow(mock_reservation_store: AsyncMock) -> FakeUnitOfWork:
    return FakeUnitOfWork(mock_reservation_store)


@pytest.fixture
def make_reservation() -> Callable[..., Reservation]:
    def _make(
        *,
        id: Optional[int] = 1,
        status: Optional[ReservationStatus] = ReservationStatus.PENDING,
        user_id: Optional[int] = 7,
        room_id: Optional[int] = 101,
        start_date: Optional[date] = date(2024, 1, 1),
        end_date: Optional[date] = date(2024, 1, 5),
    ) -> Reservation:
        return Reservation(
            user_id=user_id,
            room_id=room_id,
            start_date=start_date,
            end_date=end_date,
            status=status,
            id=id,
        )

    return _make
