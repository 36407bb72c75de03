from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from room_reservation.platform.config.di import Container
from room_reservation.platform.database.unit_of_work import AbstractUnitOfWork
from room_reservation.platform.exception.exceptions import NotFoundError
from room_reservation.platform.logging.loguru_io import Logger


class CancelReservationUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.serializable_unit_of_work])
    ):
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, reservation_id: int) -> None:
        async with self.uow:
            reservation = await self.uow.reservation_store.find_by_id(
                reservation_id=reservation_id
            )
            if reservation is None:
                raise NotFoundError(f'Not found reservation by id = {reservation_id}')

            # Raises InvalidStateError for APPROVED / CANCELLED
            cancelled = reservation.cancel()

            await self.uow.reservation_store.set_status(
                reservation_id=reservation_id, status=cancelled.status  # type: ignore[arg-type]
            )
            await self.uow.commit()

        Logger.base.info(f'Successfully cancelled reservation: id={reservation_id}')
