from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import List, Optional

import attrs

from src.service.flight_booking.domain.booking_errors import InvalidBookingArgumentError
from src.service.flight_booking.domain.value_object.flight_inventory import FlightInventory
from src.service.flight_booking.domain.value_object.passenger import Passenger


class BookingStatus(StrEnum):
    CONFIRMED = 'CONFIRMED'


@attrs.define
class Booking:
    user_id: int
    flight_id: int
    passengers: List[Passenger]
    seats_booked: int
    confirmation_code: str
    status: BookingStatus = BookingStatus.CONFIRMED
    price_per_seat: Optional[Decimal] = None
    total_price: Optional[Decimal] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @staticmethod
    def validate_request(*, flight_id: int, seats_requested: int, passengers: List[Passenger]) -> None:
        """Argument checks that must pass before any transaction is opened."""
        if flight_id <= 0:
            raise InvalidBookingArgumentError('Invalid flight_id')
        if seats_requested <= 0:
            raise InvalidBookingArgumentError('seats must be > 0')
        if len(passengers) != seats_requested:
            raise InvalidBookingArgumentError(
                'passengers must be an array with length equal to seats'
            )

    @classmethod
    def confirm(
        cls,
        *,
        user_id: int,
        inventory: FlightInventory,
        passengers: List[Passenger],
        confirmation_code: str,
    ) -> 'Booking':
        seats = len(passengers)
        return cls(
            user_id=user_id,
            flight_id=inventory.flight_id,
            passengers=list(passengers),
            seats_booked=seats,
            confirmation_code=confirmation_code,
            status=BookingStatus.CONFIRMED,
            price_per_seat=inventory.price_per_seat,
            total_price=inventory.total_for(seats),
        )
