from datetime import date
from typing import Optional

from room_reservation.platform.logging.loguru_io import Logger
from room_reservation.service.reservation.app.interface.i_reservation_store import (
    IReservationStore,
)
from room_reservation.service.reservation.domain.enum.reservation_status import (
    ReservationStatus,
)


class ConflictDetector:
    """
    Decide whether a date range in a room collides with an approved reservation.

    Pending and cancelled reservations never block; only APPROVED ones are
    looked up. Read-only: the store is queried, never written.
    """

    def __init__(self, *, reservation_store: IReservationStore) -> None:
        self.reservation_store = reservation_store

    @Logger.io
    async def has_conflict(
        self,
        *,
        room_id: int,
        start_date: date,
        end_date: date,
        exclude_id: Optional[int],
    ) -> bool:
        conflicting_ids = await self.reservation_store.find_conflicting(
            room_id=room_id,
            start_date=start_date,
            end_date=end_date,
            status=ReservationStatus.APPROVED,
            exclude_id=exclude_id,
        )
        if not conflicting_ids:
            return False

        Logger.base.bind(
            room_id=room_id,
            reservation_id=exclude_id,
            conflicting_ids=conflicting_ids,
        ).warning(
            f'⚠️ [CONFLICT] room={room_id} [{start_date}, {end_date}) overlaps approved reservations: {conflicting_ids}'
        )
        return True
