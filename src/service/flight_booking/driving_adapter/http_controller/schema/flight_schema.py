from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from src.service.flight_booking.domain.entity.flight_entity import Flight


class FlightResponse(BaseModel):
    id: int
    airline: str
    airline_code: str
    flight_number: str
    origin: str
    destination: str
    departure: datetime
    arrival: Optional[datetime] = None
    duration: Optional[str] = None
    price: float
    available_seats: int
    operational_days: List[int] = []
    raw_meta: dict[str, Any] = {}

    @classmethod
    def from_entity(cls, flight: Flight) -> 'FlightResponse':
        return cls(
            id=flight.id or 0,
            airline=flight.airline,
            airline_code=flight.airline_code,
            flight_number=flight.flight_number,
            origin=flight.origin,
            destination=flight.destination,
            departure=flight.departure,
            arrival=flight.arrival,
            duration=flight.duration,
            price=flight.price,
            available_seats=flight.available_seats,
            operational_days=flight.operational_days,
            raw_meta=flight.raw_meta,
        )


class FlightSearchMeta(BaseModel):
    count: int
    limit: int
    offset: int


class FlightSearchResponse(BaseModel):
    data: List[FlightResponse]
    meta: FlightSearchMeta
