from abc import ABC, abstractmethod
from typing import Optional

from src.service.flight_booking.domain.value_object.flight_inventory import FlightInventory


class IInventoryStore(ABC):
    """
    Authoritative seat capacity and price per flight.

    Both operations run inside the transaction of the unit of work that owns
    this store. The lock taken by lock_flight_for_update is held until that
    transaction commits or rolls back.
    """

    @abstractmethod
    async def lock_flight_for_update(self, *, flight_id: int) -> Optional[FlightInventory]:
        """Exclusive row lock + read. None when the flight does not exist."""
        pass

    @abstractmethod
    async def decrement_seats(self, *, flight_id: int, by: int) -> None:
        """Caller holds the row lock and has already validated sufficiency."""
        pass
