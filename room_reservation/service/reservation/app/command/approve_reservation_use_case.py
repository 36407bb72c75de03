from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from room_reservation.platform.config.di import Container
from room_reservation.platform.database.unit_of_work import AbstractUnitOfWork
from room_reservation.platform.exception.exceptions import ConflictError, NotFoundError
from room_reservation.platform.logging.loguru_io import Logger
from room_reservation.service.reservation.app.service.conflict_detector import ConflictDetector
from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation


class ApproveReservationUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork):
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.serializable_unit_of_work])
    ):
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, reservation_id: int) -> Reservation:
        """
        Approve a pending reservation unless an approved one in the same room overlaps it.

        The conflict check and the status write share one serializable transaction,
        so two overlapping approvals cannot both commit.

        Raises:
            NotFoundError: no reservation with this id
            InvalidStateError: reservation is not pending
            ConflictError: an approved reservation overlaps; status stays PENDING
        """
        async with self.uow:
            reservation = await self.uow.reservation_store.find_by_id(
                reservation_id=reservation_id
            )
            if reservation is None:
                raise NotFoundError(f'Not found reservation by id = {reservation_id}')

            approved = reservation.approve()

            conflict_detector = ConflictDetector(reservation_store=self.uow.reservation_store)
            if await conflict_detector.has_conflict(
                room_id=reservation.room_id,  # type: ignore[arg-type]
                start_date=reservation.start_date,  # type: ignore[arg-type]
                end_date=reservation.end_date,  # type: ignore[arg-type]
                exclude_id=reservation.id,
            ):
                raise ConflictError(
                    f'Cannot approve reservation because of conflict: id={reservation_id}'
                )

            saved = await self.uow.reservation_store.save(reservation=approved)
            await self.uow.commit()

        Logger.base.info(f'✅ [APPROVE] Reservation approved: id={reservation_id}')
        return saved
