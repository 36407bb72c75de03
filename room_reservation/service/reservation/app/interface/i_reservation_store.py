"""
Reservation Store Interface

The only persistence boundary of the reservation service: CRUD plus the
filtered and range queries the lifecycle use cases need.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation
from room_reservation.service.reservation.domain.enum.reservation_status import (
    ReservationStatus,
)


class IReservationStore(ABC):
    @abstractmethod
    async def find_by_id(self, *, reservation_id: int) -> Optional[Reservation]:
        pass

    @abstractmethod
    async def save(self, *, reservation: Reservation) -> Reservation:
        """
        Insert when `reservation.id` is None (the store assigns the id), update otherwise.

        Returns:
            The persisted reservation
        """
        pass

    @abstractmethod
    async def set_status(self, *, reservation_id: int, status: ReservationStatus) -> None:
        """Targeted status-only update; no other column is written."""
        pass

    @abstractmethod
    async def search_by_filter(
        self,
        *,
        room_id: Optional[int],
        user_id: Optional[int],
        page_number: int,
        page_size: int,
    ) -> List[Reservation]:
        pass

    @abstractmethod
    async def find_conflicting(
        self,
        *,
        room_id: int,
        start_date: date,
        end_date: date,
        status: ReservationStatus,
        exclude_id: Optional[int],
    ) -> List[int]:
        """
        Ids of reservations in `room_id` with `status` whose range overlaps
        [start_date, end_date), excluding `exclude_id`.
        """
        pass
