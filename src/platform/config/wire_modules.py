"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.flight_booking.app.command import (
    create_booking_use_case,
    login_use_case,
    register_user_use_case,
)
from src.service.flight_booking.app.query import search_flights_use_case
from src.service.flight_booking.driving_adapter.http_controller.auth import bearer_auth


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    register_user_use_case,
    login_use_case,
    search_flights_use_case,
    bearer_auth,
]
