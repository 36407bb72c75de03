from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from room_reservation.platform.config.di import Container
from room_reservation.platform.database.unit_of_work import AbstractUnitOfWork
from room_reservation.platform.exception.exceptions import NotFoundError
from room_reservation.platform.logging.loguru_io import Logger
from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation


class GetReservationUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])):
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, reservation_id: int) -> Reservation:
        async with self.uow:
            reservation = await self.uow.reservation_store.find_by_id(
                reservation_id=reservation_id
            )
        if reservation is None:
            raise NotFoundError(f'Not found reservation by id = {reservation_id}')
        return reservation
