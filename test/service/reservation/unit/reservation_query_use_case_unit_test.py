import pytest

from room_reservation.platform.exception.exceptions import InvalidArgumentError, NotFoundError
from room_reservation.service.reservation.app.dto.reservation_search_filter import (
    ReservationSearchFilter,
)
from room_reservation.service.reservation.app.query.get_reservation_use_case import (
    GetReservationUseCase,
)
from room_reservation.service.reservation.app.query.search_reservations_use_case import (
    SearchReservationsUseCase,
)


pytestmark = pytest.mark.unit


class TestGetReservation:
    @pytest.mark.asyncio
    async def test_existing_reservation_is_returned(
        self, fake_uow, mock_reservation_store, make_reservation
    ):
        reservation = make_reservation(id=8)
        mock_reservation_store.find_by_id.return_value = reservation

        result = await GetReservationUseCase(uow=fake_uow).execute(reservation_id=8)

        assert result == reservation
        mock_reservation_store.find_by_id.assert_awaited_once_with(reservation_id=8)

    @pytest.mark.asyncio
    async def test_unknown_id_is_not_found(self, fake_uow, mock_reservation_store):
        mock_reservation_store.find_by_id.return_value = None

        with pytest.raises(NotFoundError, match='Not found reservation by id = 8'):
            await GetReservationUseCase(uow=fake_uow).execute(reservation_id=8)


class TestSearchReservations:
    @pytest.fixture
    def use_case(self, fake_uow) -> SearchReservationsUseCase:
        return SearchReservationsUseCase(uow=fake_uow, default_page_size=10, max_page_size=100)

    @pytest.mark.asyncio
    async def test_defaults_are_first_page_of_ten(self, use_case, mock_reservation_store):
        mock_reservation_store.search_by_filter.return_value = []

        await use_case.execute(search_filter=ReservationSearchFilter())

        mock_reservation_store.search_by_filter.assert_awaited_once_with(
            room_id=None, user_id=None, page_number=0, page_size=10
        )

    @pytest.mark.asyncio
    async def test_filters_and_paging_are_passed_through(
        self, use_case, mock_reservation_store, make_reservation
    ):
        mock_reservation_store.search_by_filter.return_value = [make_reservation()]

        result = await use_case.execute(
            search_filter=ReservationSearchFilter(room_id=101, user_id=7, page_size=5, page_number=2)
        )

        assert len(result) == 1
        mock_reservation_store.search_by_filter.assert_awaited_once_with(
            room_id=101, user_id=7, page_number=2, page_size=5
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'search_filter',
        [
            ReservationSearchFilter(page_size=-1),
            ReservationSearchFilter(page_number=-1),
            ReservationSearchFilter(page_size=101),
        ],
    )
    async def test_invalid_paging_is_rejected(
        self, use_case, mock_reservation_store, search_filter
    ):
        with pytest.raises(InvalidArgumentError):
            await use_case.execute(search_filter=search_filter)

        mock_reservation_store.search_by_filter.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_zero_page_size_returns_empty_page(self, use_case, mock_reservation_store):
        result = await use_case.execute(search_filter=ReservationSearchFilter(page_size=0))

        assert result == []
        mock_reservation_store.search_by_filter.assert_not_awaited()
