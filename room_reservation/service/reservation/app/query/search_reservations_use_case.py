from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from room_reservation.platform.config.core_setting import settings
from room_reservation.platform.config.di import Container
from room_reservation.platform.database.unit_of_work import AbstractUnitOfWork
from room_reservation.platform.exception.exceptions import InvalidArgumentError
from room_reservation.platform.logging.loguru_io import Logger
from room_reservation.service.reservation.app.dto.reservation_search_filter import (
    ReservationSearchFilter,
)
from room_reservation.service.reservation.domain.entity.reservation_entity import Reservation


class SearchReservationsUseCase:
    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        default_page_size: int = settings.RESERVATION_DEFAULT_PAGE_SIZE,
        max_page_size: int = settings.RESERVATION_MAX_PAGE_SIZE,
    ):
        self.uow = uow
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])):
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, search_filter: ReservationSearchFilter) -> List[Reservation]:
        """
        Page through reservations matching the optional room/user filters, ordered by id.

        Raises:
            InvalidArgumentError: negative page number, negative page size,
                or a page size above the configured maximum
        """
        page_size = (
            self.default_page_size if search_filter.page_size is None else search_filter.page_size
        )
        page_number = 0 if search_filter.page_number is None else search_filter.page_number

        if page_size < 0:
            raise InvalidArgumentError(f'Page size must not be negative: {page_size}')
        if page_size > self.max_page_size:
            raise InvalidArgumentError(
                f'Page size must not exceed {self.max_page_size}: {page_size}'
            )
        if page_number < 0:
            raise InvalidArgumentError(f'Page number must not be negative: {page_number}')
        if page_size == 0:
            return []

        async with self.uow:
            return await self.uow.reservation_store.search_by_filter(
                room_id=search_filter.room_id,
                user_id=search_filter.user_id,
                page_number=page_number,
                page_size=page_size,
            )
