from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from room_reservation.platform.logging.loguru_io import Logger
from room_reservation.service.reservation.app.command.approve_reservation_use_case import (
    ApproveReservationUseCase,
)
from room_reservation.service.reservation.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from room_reservation.service.reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from room_reservation.service.reservation.app.command.update_reservation_use_case import (
    UpdateReservationUseCase,
)
from room_reservation.service.reservation.app.dto.reservation_search_filter import (
    ReservationSearchFilter,
)
from room_reservation.service.reservation.app.query.get_reservation_use_case import (
    GetReservationUseCase,
)
from room_reservation.service.reservation.app.query.search_reservations_use_case import (
    SearchReservationsUseCase,
)
from room_reservation.service.reservation.driving_adapter.http_controller.schema.reservation_schema import (
    ReservationCreateRequest,
    ReservationResponse,
    ReservationUpdateRequest,
)


router = APIRouter()


@router.get('/{reservation_id}')
@Logger.io
async def get_reservation(
    reservation_id: int,
    use_case: GetReservationUseCase = Depends(GetReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(reservation_id=reservation_id)
    return ReservationResponse.from_entity(reservation)


@router.get('')
@Logger.io
async def search_reservations(
    room_id: Optional[int] = None,
    user_id: Optional[int] = None,
    page_size: Optional[int] = None,
    page_number: Optional[int] = None,
    use_case: SearchReservationsUseCase = Depends(SearchReservationsUseCase.depends),
) -> List[ReservationResponse]:
    reservations = await use_case.execute(
        search_filter=ReservationSearchFilter(
            room_id=room_id,
            user_id=user_id,
            page_size=page_size,
            page_number=page_number,
        )
    )
    return [ReservationResponse.from_entity(reservation) for reservation in reservations]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_reservation(
    request: ReservationCreateRequest,
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(candidate=request.to_candidate())
    return ReservationResponse.from_entity(reservation)


@router.put('/{reservation_id}')
@Logger.io
async def update_reservation(
    reservation_id: int,
    request: ReservationUpdateRequest,
    use_case: UpdateReservationUseCase = Depends(UpdateReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(
        reservation_id=reservation_id, candidate=request.to_candidate()
    )
    return ReservationResponse.from_entity(reservation)


@router.post('/{reservation_id}/cancel', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def cancel_reservation(
    reservation_id: int,
    use_case: CancelReservationUseCase = Depends(CancelReservationUseCase.depends),
) -> Response:
    await use_case.execute(reservation_id=reservation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post('/{reservation_id}/approve')
@Logger.io
async def approve_reservation(
    reservation_id: int,
    use_case: ApproveReservationUseCase = Depends(ApproveReservationUseCase.depends),
) -> ReservationResponse:
    reservation = await use_case.execute(reservation_id=reservation_id)
    return ReservationResponse.from_entity(reservation)
