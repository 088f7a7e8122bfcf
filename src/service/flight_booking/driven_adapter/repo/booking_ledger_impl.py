from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_booking_ledger import IBookingLedger
from src.service.flight_booking.domain.entity.booking_entity import Booking, BookingStatus
from src.service.flight_booking.domain.value_object.passenger import Passenger
from src.service.flight_booking.driven_adapter.model.booking_model import BookingModel


class BookingLedgerImpl(IBookingLedger):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def insert(self, *, booking: Booking) -> Booking:
        booking_model = BookingModel(
            user_id=booking.user_id,
            flight_id=booking.flight_id,
            passengers=[passenger.to_dict() for passenger in booking.passengers],
            seats_booked=booking.seats_booked,
            confirmation_code=booking.confirmation_code,
            status=booking.status.value,
            price_per_seat=booking.price_per_seat,
            total_price=booking.total_price,
        )
        self.session.add(booking_model)
        await self.session.flush()
        # Load store-assigned columns (id, created_at) inside the transaction
        await self.session.refresh(booking_model)

        return self._model_to_entity(booking_model)

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        result = await self.session.execute(
            select(BookingModel).where(BookingModel.id == booking_id)
        )
        booking_model = result.scalar_one_or_none()

        if not booking_model:
            return None

        return self._model_to_entity(booking_model)

    @staticmethod
    def _model_to_entity(booking_model: BookingModel) -> Booking:
        return Booking(
            id=booking_model.id,
            user_id=booking_model.user_id,
            flight_id=booking_model.flight_id,
            passengers=[Passenger.from_dict(p) for p in booking_model.passengers],
            seats_booked=booking_model.seats_booked,
            confirmation_code=booking_model.confirmation_code,
            status=BookingStatus(booking_model.status),
            price_per_seat=booking_model.price_per_seat,
            total_price=booking_model.total_price,
            created_at=booking_model.created_at,
        )
