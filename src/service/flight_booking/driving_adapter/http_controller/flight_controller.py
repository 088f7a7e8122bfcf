from typing import Optional

from fastapi import APIRouter, Depends, Query

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.query.search_flights_use_case import (
    DEFAULT_LIMIT,
    SearchFlightsUseCase,
)
from src.service.flight_booking.driving_adapter.http_controller.schema.flight_schema import (
    FlightResponse,
    FlightSearchMeta,
    FlightSearchResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def search_flights(
    origin: str = Query(..., description='3-letter IATA code'),
    destination: str = Query(..., description='3-letter IATA code'),
    date: Optional[str] = Query(None, description='Departure date, YYYY-MM-DD'),
    passengers: int = 1,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
    sort: str = 'price',
    use_case: SearchFlightsUseCase = Depends(SearchFlightsUseCase.depends),
) -> FlightSearchResponse:
    flights = await use_case.search(
        origin=origin,
        destination=destination,
        departure_date=date,
        passengers=passengers,
        sort=sort,
        limit=limit,
        offset=offset,
    )
    return FlightSearchResponse(
        data=[FlightResponse.from_entity(flight) for flight in flights],
        meta=FlightSearchMeta(count=len(flights), limit=limit, offset=offset),
    )


@router.get('/{flight_id}')
@Logger.io
async def get_flight(
    flight_id: int,
    use_case: SearchFlightsUseCase = Depends(SearchFlightsUseCase.depends),
) -> FlightResponse:
    flight = await use_case.get_flight(flight_id=flight_id)
    return FlightResponse.from_entity(flight)
