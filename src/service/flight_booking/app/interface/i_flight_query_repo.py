from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from src.service.flight_booking.domain.entity.flight_entity import Flight


class IFlightQueryRepo(ABC):
    @abstractmethod
    async def search(
        self,
        *,
        origin: str,
        destination: str,
        departure_date: Optional[date],
        min_available_seats: int,
        sort: str,
        limit: int,
        offset: int,
    ) -> List[Flight]:
        pass

    @abstractmethod
    async def get_by_id(self, *, flight_id: int) -> Optional[Flight]:
        pass
