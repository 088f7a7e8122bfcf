from decimal import Decimal

import attrs


@attrs.frozen
class FlightInventory:
    """Seat count and price of one flight, as read under the row lock."""

    flight_id: int
    available_seats: int
    price_per_seat: Decimal

    def can_accommodate(self, seats: int) -> bool:
        return self.available_seats >= seats

    def total_for(self, seats: int) -> Decimal:
        return self.price_per_seat * seats
