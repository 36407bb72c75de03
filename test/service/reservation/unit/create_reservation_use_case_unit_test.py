from datetime import date

import attrs
import pytest

from room_reservation.platform.exception.exceptions import InvalidArgumentError
from room_reservation.service.reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation
from room_reservation.service.reservation.domain.enum.reservation_status import (
    ReservationStatus,
)


pytestmark = pytest.mark.unit


def _candidate(**overrides) -> Reservation:
    fields = {
        'user_id': 7,
        'room_id': 101,
        'start_date': date(2024, 1, 1),
        'end_date': date(2024, 1, 5),
    }
    fields.update(overrides)
    return Reservation(**fields)


class TestCreateReservation:
    @pytest.fixture
    def use_case(self, fake_uow, mock_reservation_store) -> CreateReservationUseCase:
        mock_reservation_store.save.side_effect = lambda *, reservation: attrs.evolve(
            reservation, id=42
        )
        return CreateReservationUseCase(uow=fake_uow)

    @pytest.mark.asyncio
    async def test_valid_candidate_is_saved_as_pending(
        self, use_case, fake_uow, mock_reservation_store
    ):
        created = await use_case.execute(candidate=_candidate())

        assert created.id == 42
        assert created.status == ReservationStatus.PENDING
        saved = mock_reservation_store.save.await_args.kwargs['reservation']
        assert saved.id is None
        assert saved.status == ReservationStatus.PENDING
        assert fake_uow.committed is True

    @pytest.mark.asyncio
    async def test_candidate_with_id_is_rejected(self, use_case, fake_uow, mock_reservation_store):
        with pytest.raises(InvalidArgumentError, match='id must not be provided'):
            await use_case.execute(candidate=_candidate(id=5))

        mock_reservation_store.save.assert_not_awaited()
        assert fake_uow.committed is False

    @pytest.mark.asyncio
    async def test_candidate_with_status_is_rejected(self, use_case, mock_reservation_store):
        with pytest.raises(InvalidArgumentError, match='status must not be provided'):
            await use_case.execute(candidate=_candidate(status=ReservationStatus.APPROVED))

        mock_reservation_store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_end_date_not_after_start_date_is_rejected(self, use_case, mock_reservation_store):
        with pytest.raises(InvalidArgumentError):
            await use_case.execute(
                candidate=_candidate(start_date=date(2024, 1, 5), end_date=date(2024, 1, 5))
            )

        mock_reservation_store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_overlap_with_approved_reservation_does_not_block_creation(
        self, use_case, mock_reservation_store
    ):
        """Conflicts are only checked on approval."""
        mock_reservation_store.find_conflicting.return_value = [1]

        created = await use_case.execute(candidate=_candidate())

        assert created.status == ReservationStatus.PENDING
        mock_reservation_store.find_conflicting.assert_not_awaited()
