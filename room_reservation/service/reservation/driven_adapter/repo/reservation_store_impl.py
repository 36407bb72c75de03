"""
Reservation Store Implementation (SQLAlchemy)

Runs on the session owned by the unit of work: it flushes but never commits,
so every call joins the caller's transaction.
"""

from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from room_reservation.platform.exception.exceptions import NotFoundError
from room_reservation.platform.logging.loguru_io import Logger
from room_reservation.service.reservation.app.interface.i_reservation_store import (
    IReservationStore,
)
from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation
from room_reservation.service.reservation.domain.enum.reservation_status import (
    ReservationStatus,
)
from room_reservation.service.reservation.driven_adapter.model.reservation_model import (
    ReservationModel,
)


class ReservationStoreImpl(IReservationStore):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(model: ReservationModel) -> Reservation:
        return Reservation(
            user_id=model.user_id,
            room_id=model.room_id,
            start_date=model.start_date,
            end_date=model.end_date,
            status=ReservationStatus(model.status),
            id=model.id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @Logger.io
    async def find_by_id(self, *, reservation_id: int) -> Optional[Reservation]:
        result = await self.session.execute(
            select(ReservationModel).where(ReservationModel.id == reservation_id)
        )
        model = result.scalar_one_or_none()
        if not model:
            return None
        return self._to_entity(model)

    @Logger.io
    async def save(self, *, reservation: Reservation) -> Reservation:
        status = reservation.status or ReservationStatus.PENDING
        now = datetime.now(timezone.utc)

        if reservation.id is None:
            model = ReservationModel(
                user_id=reservation.user_id,
                room_id=reservation.room_id,
                start_date=reservation.start_date,
                end_date=reservation.end_date,
                status=status.value,
                created_at=reservation.created_at or now,
                updated_at=reservation.updated_at or now,
            )
            self.session.add(model)
        else:
            model = await self.session.get(ReservationModel, reservation.id)
            if model is None:
                raise NotFoundError(f'Not found reservation by id = {reservation.id}')
            model.user_id = reservation.user_id  # type: ignore[assignment]
            model.room_id = reservation.room_id  # type: ignore[assignment]
            model.start_date = reservation.start_date  # type: ignore[assignment]
            model.end_date = reservation.end_date  # type: ignore[assignment]
            model.status = status.value
            model.updated_at = reservation.updated_at or now

        await self.session.flush()
        await self.session.refresh(model)
        return self._to_entity(model)

    @Logger.io
    async def set_status(self, *, reservation_id: int, status: ReservationStatus) -> None:
        await self.session.execute(
            update(ReservationModel)
            .where(ReservationModel.id == reservation_id)
            .values(status=status.value, updated_at=datetime.now(timezone.utc))
        )

    @Logger.io
    async def search_by_filter(
        self,
        *,
        room_id: Optional[int],
        user_id: Optional[int],
        page_number: int,
        page_size: int,
    ) -> List[Reservation]:
        stmt = select(ReservationModel)
        if room_id is not None:
            stmt = stmt.where(ReservationModel.room_id == room_id)
        if user_id is not None:
            stmt = stmt.where(ReservationModel.user_id == user_id)
        stmt = stmt.order_by(ReservationModel.id).offset(page_number * page_size).limit(page_size)

        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def find_conflicting(
        self,
        *,
        room_id: int,
        start_date: date,
        end_date: date,
        status: ReservationStatus,
        exclude_id: Optional[int],
    ) -> List[int]:
        # Half-open ranges: [s1, e1) and [s2, e2) overlap iff s1 < e2 and s2 < e1
        stmt = select(ReservationModel.id).where(
            ReservationModel.room_id == room_id,
            ReservationModel.status == status.value,
            ReservationModel.start_date < end_date,
            ReservationModel.end_date > start_date,
        )
        if exclude_id is not None:
            stmt = stmt.where(ReservationModel.id != exclude_id)

        result = await self.session.execute(stmt.order_by(ReservationModel.id))
        return list(result.scalars().all())
