"""
Unit tests for the Reservation entity lifecycle

PENDING -> APPROVED | CANCELLED; only PENDING reservations can be rescheduled.
"""

from datetime import date

import pytest

from room_reservation.platform.exception.exceptions import InvalidArgumentError, InvalidStateError
from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation
from room_reservation.service.reservation.domain.enum.reservation_status import (
    ReservationStatus,
)


pytestmark = pytest.mark.unit


class TestReservationCreate:
    def test_new_reservation_is_pending_without_id(self):
        reservation = Reservation.create(
            user_id=7, room_id=101, start_date=date(2024, 1, 1), end_date=date(2024, 1, 5)
        )

        assert reservation.status == ReservationStatus.PENDING
        assert reservation.id is None
        assert reservation.created_at is not None
        assert reservation.updated_at == reservation.created_at

    def test_one_night_stay_is_valid(self):
        reservation = Reservation.create(
            user_id=7, room_id=101, start_date=date(2024, 1, 1), end_date=date(2024, 1, 2)
        )

        assert reservation.date_range.end_date == date(2024, 1, 2)

    @pytest.mark.parametrize(
        'start_date,end_date',
        [
            (date(2024, 1, 5), date(2024, 1, 5)),
            (date(2024, 1, 5), date(2024, 1, 1)),
        ],
    )
    def test_end_date_not_after_start_date_is_rejected(self, start_date, end_date):
        with pytest.raises(InvalidArgumentError, match='End date must be at least one day'):
            Reservation.create(user_id=7, room_id=101, start_date=start_date, end_date=end_date)

    def test_missing_dates_are_rejected(self):
        with pytest.raises(InvalidArgumentError, match='Start date and end date are required'):
            Reservation.create(user_id=7, room_id=101, start_date=None, end_date=date(2024, 1, 5))

    def test_missing_user_is_rejected(self):
        with pytest.raises(InvalidArgumentError, match='User id is required'):
            Reservation.create(
                user_id=None, room_id=101, start_date=date(2024, 1, 1), end_date=date(2024, 1, 5)
            )

    def test_missing_room_is_rejected(self):
        with pytest.raises(InvalidArgumentError, match='Room id is required'):
            Reservation.create(
                user_id=7, room_id=None, start_date=date(2024, 1, 1), end_date=date(2024, 1, 5)
            )


class TestReservationReschedule:
    def test_pending_reservation_moves_to_new_dates(self, make_reservation):
        reservation = make_reservation(id=3)

        moved = reservation.reschedule(start_date=date(2024, 2, 1), end_date=date(2024, 2, 3))

        assert moved.id == 3
        assert moved.status == ReservationStatus.PENDING
        assert (moved.start_date, moved.end_date) == (date(2024, 2, 1), date(2024, 2, 3))
        # Original is untouched
        assert reservation.start_date == date(2024, 1, 1)

    @pytest.mark.parametrize('status', [ReservationStatus.APPROVED, ReservationStatus.CANCELLED])
    def test_non_pending_reservation_cannot_be_rescheduled(self, make_reservation, status):
        reservation = make_reservation(status=status)

        with pytest.raises(InvalidStateError, match=f'status = {status}'):
            reservation.reschedule(start_date=date(2024, 2, 1), end_date=date(2024, 2, 3))

    def test_invalid_new_range_is_rejected(self, make_reservation):
        with pytest.raises(InvalidArgumentError):
            make_reservation().reschedule(start_date=date(2024, 2, 3), end_date=date(2024, 2, 1))


class TestReservationApprove:
    def test_pending_becomes_approved(self, make_reservation):
        approved = make_reservation().approve()

        assert approved.status == ReservationStatus.APPROVED

    @pytest.mark.parametrize('status', [ReservationStatus.APPROVED, ReservationStatus.CANCELLED])
    def test_non_pending_cannot_be_approved(self, make_reservation, status):
        with pytest.raises(InvalidStateError):
            make_reservation(status=status).approve()


class TestReservationCancel:
    def test_pending_becomes_cancelled(self, make_reservation):
        cancelled = make_reservation().cancel()

        assert cancelled.status == ReservationStatus.CANCELLED

    def test_approved_cannot_be_cancelled(self, make_reservation):
        with pytest.raises(InvalidStateError, match='contact the manager'):
            make_reservation(status=ReservationStatus.APPROVED).cancel()

    def test_cancelled_cannot_be_cancelled_again(self, make_reservation):
        with pytest.raises(InvalidStateError, match='already cancelled'):
            make_reservation(status=ReservationStatus.CANCELLED).cancel()
