from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from room_reservation.platform.config.di import Container
from room_reservation.platform.database.unit_of_work import AbstractUnitOfWork
from room_reservation.platform.exception.exceptions import InvalidArgumentError
from room_reservation.platform.logging.loguru_io import Logger
from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation


class CreateReservationUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])):
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, candidate: Reservation) -> Reservation:
        # id and status are assigned here, never by the caller
        if candidate.id is not None:
            raise InvalidArgumentError(
                f'Reservation id must not be provided on create: id={candidate.id}'
            )
        if candidate.status is not None:
            raise InvalidArgumentError(
                f'Reservation status must not be provided on create: status={candidate.status}'
            )

        reservation = Reservation.create(
            user_id=candidate.user_id,
            room_id=candidate.room_id,
            start_date=candidate.start_date,
            end_date=candidate.end_date,
        )

        async with self.uow:
            created = await self.uow.reservation_store.save(reservation=reservation)
            await self.uow.commit()

        Logger.base.info(f'📝 [CREATE] Reservation created: id={created.id} room={created.room_id}')
        return created
