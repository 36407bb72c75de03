from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation
from room_reservation.service.reservation.domain.enum.reservation_status import (
    ReservationStatus,
)


class ReservationCreateRequest(BaseModel):
    # id and status are accepted only so that a client supplying them gets a 400
    user_id: Optional[int] = None
    room_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    id: Optional[int] = None
    status: Optional[ReservationStatus] = None

    class Config:
        json_schema_extra = {
            'example': {
                'user_id': 1,
                'room_id': 101,
                'start_date': '2024-01-01',
                'end_date': '2024-01-05',
            }
        }

    def to_candidate(self) -> Reservation:
        return Reservation(
            user_id=self.user_id,
            room_id=self.room_id,
            start_date=self.start_date,
            end_date=self.end_date,
            status=self.status,
            id=self.id,
        )


class ReservationUpdateRequest(BaseModel):
    user_id: Optional[int] = None
    room_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    class Config:
        json_schema_extra = {'example': {'start_date': '2024-01-02', 'end_date': '2024-01-06'}}

    def to_candidate(self) -> Reservation:
        return Reservation(
            user_id=self.user_id,
            room_id=self.room_id,
            start_date=self.start_date,
            end_date=self.end_date,
        )


class ReservationResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'user_id': 1,
                'room_id': 101,
                'start_date': '2024-01-01',
                'end_date': '2024-01-05',
                'status': 'PENDING',
                'created_at': '2024-01-01T10:30:00',
                'updated_at': '2024-01-01T10:30:00',
            }
        },
    }

    id: int
    user_id: int
    room_id: int
    start_date: date
    end_date: date
    status: ReservationStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, reservation: Reservation) -> 'ReservationResponse':
        return cls(
            id=reservation.id,  # type: ignore[arg-type]
            user_id=reservation.user_id,  # type: ignore[arg-type]
            room_id=reservation.room_id,  # type: ignore[arg-type]
            start_date=reservation.start_date,  # type: ignore[arg-type]
            end_date=reservation.end_date,  # type: ignore[arg-type]
            status=reservation.status,  # type: ignore[arg-type]
            created_at=reservation.created_at,
            updated_at=reservation.updated_at,
        )
