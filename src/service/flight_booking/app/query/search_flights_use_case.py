from datetime import date
import re
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_booking.domain.booking_errors import FlightNotFoundError
from src.service.flight_booking.domain.entity.flight_entity import Flight


IATA_CODE = re.compile(r'^[A-Z]{3}$')
SORT_OPTIONS = ('price', 'departure')
DEFAULT_LIMIT = 50
MAX_LIMIT = 200


class SearchFlightsUseCase:
    def __init__(self, *, flight_query_repo: IFlightQueryRepo) -> None:
        self.flight_query_repo = flight_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        flight_query_repo: IFlightQueryRepo = Depends(Provide[Container.flight_query_repo]),
    ) -> Self:
        return cls(flight_query_repo=flight_query_repo)

    @Logger.io
    async def search(
        self,
        *,
        origin: str,
        destination: str,
        departure_date: Optional[str] = None,
        passengers: int = 1,
        sort: str = 'price',
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> List[Flight]:
        origin = origin.strip().upper()
        destination = destination.strip().upper()
        if not IATA_CODE.match(origin) or not IATA_CODE.match(destination):
            raise DomainError('origin and destination must be 3-letter IATA codes')

        parsed_date: Optional[date] = None
        if departure_date:
            try:
                parsed_date = date.fromisoformat(departure_date)
            except ValueError as e:
                raise DomainError('date must be in YYYY-MM-DD format') from e

        if passengers < 1:
            raise DomainError('passengers must be > 0')
        if sort not in SORT_OPTIONS:
            raise DomainError(f'sort must be one of: {", ".join(SORT_OPTIONS)}')
        if offset < 0:
            raise DomainError('offset must be >= 0')

        return await self.flight_query_repo.search(
            origin=origin,
            destination=destination,
            departure_date=parsed_date,
            min_available_seats=passengers,
            sort=sort,
            limit=min(max(limit, 1), MAX_LIMIT),
            offset=offset,
        )

    @Logger.io
    async def get_flight(self, *, flight_id: int) -> Flight:
        flight = await self.flight_query_repo.get_by_id(flight_id=flight_id)
        if not flight:
            raise FlightNotFoundError()
        return flight
