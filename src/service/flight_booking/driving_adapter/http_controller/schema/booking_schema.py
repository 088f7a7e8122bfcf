from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.service.flight_booking.domain.entity.booking_entity import Booking
from src.service.flight_booking.domain.value_object.passenger import Passenger


class PassengerSchema(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    age: Optional[int] = Field(default=None, ge=0, le=130)
    document_id: Optional[str] = Field(default=None, max_length=64)
    gender: Optional[str] = Field(default=None, max_length=20)
    nationality: Optional[str] = Field(default=None, max_length=64)

    def to_passenger(self) -> Passenger:
        return Passenger(
            name=self.name,
            age=self.age,
            document_id=self.document_id,
            gender=self.gender,
            nationality=self.nationality,
        )


class PassengerDetail(BaseModel):
    name: str
    age: Optional[int] = None
    document_id: Optional[str] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None


class BookingCreateRequest(BaseModel):
    flight_id: int
    seats: int
    passengers: List[PassengerSchema]

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'flight_id': 1,
                    'seats': 2,
                    'passengers': [
                        {'name': 'Ada Lovelace', 'age': 36, 'document_id': 'P1234567'},
                        {'name': 'Charles Babbage', 'age': 79, 'document_id': 'P7654321'},
                    ],
                }
            ]
        }
    }


class BookingDetail(BaseModel):
    id: int
    user_id: int
    flight_id: int
    passengers: List[PassengerDetail]
    seats_booked: int
    confirmation_code: str
    status: str
    created_at: Optional[datetime] = None
    price_per_seat: Optional[float] = None
    total_price: Optional[float] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingDetail':
        return cls(
            id=booking.id or 0,
            user_id=booking.user_id,
            flight_id=booking.flight_id,
            passengers=[PassengerDetail(**p.to_dict()) for p in booking.passengers],
            seats_booked=booking.seats_booked,
            confirmation_code=booking.confirmation_code,
            status=booking.status.value,
            created_at=booking.created_at,
            price_per_seat=booking.price_per_seat,
            total_price=booking.total_price,
        )


class BookingResponse(BaseModel):
    booking: BookingDetail
