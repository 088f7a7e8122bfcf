from typing import Self

from fastapi import Depends

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.domain.booking_errors import BookingNotFoundError
from src.service.flight_booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
    """Plain read by id. Ownership is checked by the caller."""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def get_booking(self, *, booking_id: int) -> Booking:
        async with self.uow:
            booking = await self.uow.booking_ledger.get_by_id(booking_id=booking_id)

        if not booking:
            raise BookingNotFoundError()

        return booking
