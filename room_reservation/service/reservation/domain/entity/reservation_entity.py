from datetime import date, datetime, timezone
from typing import Optional

import attrs

from room_reservation.platform.exception.exceptions import InvalidArgumentError, InvalidStateError
from room_reservation.platform.logging.loguru_io import Logger
from room_reservation.service.reservation.domain.enum.reservation_status import (
    ReservationStatus,
)
from room_reservation.service.reservation.domain.value_object.date_range import DateRange


@attrs.define
class Reservation:
    """
    Room reservation over a half-open date range.

    Client input (a create/update candidate) uses the same type with `id` and
    `status` left unset; persisted reservations always carry both.

    Lifecycle:
        PENDING -> APPROVED   (approve, only when no approved overlap exists)
        PENDING -> CANCELLED  (cancel)
        PENDING -> PENDING    (reschedule)
    APPROVED and CANCELLED reservations cannot be edited.
    """

    user_id: Optional[int]
    room_id: Optional[int]
    start_date: Optional[date]
    end_date: Optional[date]
    status: Optional[ReservationStatus] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def date_range(self) -> DateRange:
        return DateRange(start_date=self.start_date, end_date=self.end_date)  # type: ignore[arg-type]

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: Optional[int],
        room_id: Optional[int],
        start_date: Optional[date],
        end_date: Optional[date],
    ) -> 'Reservation':
        if user_id is None:
            raise InvalidArgumentError('User id is required')
        if room_id is None:
            raise InvalidArgumentError('Room id is required')
        DateRange(start_date=start_date, end_date=end_date)  # type: ignore[arg-type]

        now = datetime.now(timezone.utc)
        return cls(
            user_id=user_id,
            room_id=room_id,
            start_date=start_date,
            end_date=end_date,
            status=ReservationStatus.PENDING,
            id=None,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def reschedule(self, *, start_date: Optional[date], end_date: Optional[date]) -> 'Reservation':
        """
        Move a pending reservation to new dates; status stays PENDING.

        Raises:
            InvalidStateError: reservation is no longer pending
            InvalidArgumentError: end date is not after start date
        """
        if self.status != ReservationStatus.PENDING:
            raise InvalidStateError(f'Cannot modify reservation with status = {self.status}')
        new_range = DateRange(start_date=start_date, end_date=end_date)  # type: ignore[arg-type]

        return attrs.evolve(
            self,
            start_date=new_range.start_date,
            end_date=new_range.end_date,
            status=ReservationStatus.PENDING,
            updated_at=datetime.now(timezone.utc),
        )

    @Logger.io
    def approve(self) -> 'Reservation':
        # Overlap with other approved reservations is checked by ConflictDetector
        if self.status != ReservationStatus.PENDING:
            raise InvalidStateError(f'Cannot approve reservation with status = {self.status}')
        return attrs.evolve(
            self, status=ReservationStatus.APPROVED, updated_at=datetime.now(timezone.utc)
        )

    @Logger.io
    def cancel(self) -> 'Reservation':
        if self.status == ReservationStatus.APPROVED:
            raise InvalidStateError(
                f'Cannot cancel approved reservation, please contact the manager: id={self.id}'
            )
        if self.status == ReservationStatus.CANCELLED:
            raise InvalidStateError(f'Reservation is already cancelled: id={self.id}')
        return attrs.evolve(
            self, status=ReservationStatus.CANCELLED, updated_at=datetime.now(timezone.utc)
        )
