from abc import ABC, abstractmethod
from typing import List

from src.service.flight_booking.domain.entity.flight_entity import Flight


class IFlightCommandRepo(ABC):
    @abstractmethod
    async def upsert_many(self, *, flights: List[Flight]) -> int:
        """
        Insert or update on (airline_code, flight_number, departure), one transaction.
        Returns the number of rows written.
        """
        pass
