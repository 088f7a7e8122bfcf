from abc import ABC, abstractmethod
from typing import Optional

from src.service.flight_booking.domain.entity.booking_entity import Booking


class IBookingLedger(ABC):
    """Append-only record of confirmed bookings"""

    @abstractmethod
    async def insert(self, *, booking: Booking) -> Booking:
        """Returns the booking with id and created_at assigned by the store."""
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        pass
