"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between the service entrypoint and the API tests.
"""

from types import ModuleType

from room_reservation.service.reservation.app.command import (
    approve_reservation_use_case,
    cancel_reservation_use_case,
    create_reservation_use_case,
    update_reservation_use_case,
)
from room_reservation.service.reservation.app.query import (
    get_reservation_use_case,
    search_reservations_use_case,
)
from room_reservation.service.reservation.driving_adapter.http_controller import (
    reservation_controller,
)


WIRE_MODULES: list[ModuleType] = [
    get_reservation_use_case,
    search_reservations_use_case,
    create_reservation_use_case,
    update_reservation_use_case,
    cancel_reservation_use_case,
    approve_reservation_use_case,
    reservation_controller,
]
