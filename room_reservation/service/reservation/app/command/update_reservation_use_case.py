from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from room_reservation.platform.config.di import Container
from room_reservation.platform.database.unit_of_work import AbstractUnitOfWork
from room_reservation.platform.exception.exceptions import InvalidArgumentError, NotFoundError
from room_reservation.platform.logging.loguru_io import Logger
from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation


class UpdateReservationUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])):
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, reservation_id: int, candidate: Reservation) -> Reservation:
        """
        Reschedule a pending reservation.

        Only the dates are editable: a candidate naming a different user or room is
        rejected, and candidate id/status are ignored. The stored id is kept and the
        status stays PENDING.
        """
        async with self.uow:
            current = await self.uow.reservation_store.find_by_id(reservation_id=reservation_id)
            if current is None:
                raise NotFoundError(f'Not found reservation by id = {reservation_id}')

            # Raises InvalidStateError for APPROVED / CANCELLED before any argument check
            rescheduled = current.reschedule(
                start_date=candidate.start_date, end_date=candidate.end_date
            )
            if candidate.user_id is not None and candidate.user_id != current.user_id:
                raise InvalidArgumentError(
                    f'User id cannot be changed: {current.user_id} -> {candidate.user_id}'
                )
            if candidate.room_id is not None and candidate.room_id != current.room_id:
                raise InvalidArgumentError(
                    f'Room id cannot be changed: {current.room_id} -> {candidate.room_id}'
                )

            updated = await self.uow.reservation_store.save(reservation=rescheduled)
            await self.uow.commit()

        return updated
