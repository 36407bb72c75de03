from typing import Optional

import attrs


@attrs.define(frozen=True)
class ReservationSearchFilter:
    room_id: Optional[int] = None
    user_id: Optional[int] = None
    page_size: Optional[int] = None
    page_number: Optional[int] = None
