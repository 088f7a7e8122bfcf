from typing import List, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_confirmation_code_generator import (
    IConfirmationCodeGenerator,
)
from src.service.flight_booking.domain.booking_errors import (
    BookingFailedError,
    FlightNotFoundError,
    InsufficientSeatsError,
)
from src.service.flight_booking.domain.entity.booking_entity import Booking
from src.service.flight_booking.domain.value_object.passenger import Passenger


class CreateBookingUseCase:
    """
    Booking transaction engine - reserve N seats on one flight and record the booking

    Flow (one transaction):
    1. Lock the flight row (SELECT ... FOR UPDATE)
    2. Reject if the flight is missing or has fewer seats than requested
    3. Decrement available_seats
    4. Insert the CONFIRMED booking with a fresh confirmation code
    5. Commit, then read the booking back

    Concurrent bookings of the same flight serialize on the row lock in step 1,
    so the seat check in step 2 always sees the latest committed count.
    Bookings of different flights do not block each other.

    Any failure before commit rolls the whole transaction back. Store failures
    surface as BookingFailedError (500) and are never retried here.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        confirmation_code_generator: IConfirmationCodeGenerator,
    ) -> None:
        self.uow = uow
        self.confirmation_code_generator = confirmation_code_generator

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        confirmation_code_generator: IConfirmationCodeGenerator = Depends(
            Provide[Container.confirmation_code_generator]
        ),
    ) -> Self:
        return cls(uow=uow, confirmation_code_generator=confirmation_code_generator)

    @Logger.io
    async def create_booking(
        self,
        *,
        user_id: int,
        flight_id: int,
        passengers: List[Passenger],
        seats_requested: int,
    ) -> Booking:
        """
        Raises:
            InvalidBookingArgumentError: bad arguments, no store interaction happened
            FlightNotFoundError: flight does not exist
            InsufficientSeatsError: fewer seats left than requested
            BookingFailedError: store failure, transaction rolled back
        """
        Booking.validate_request(
            flight_id=flight_id, seats_requested=seats_requested, passengers=passengers
        )

        try:
            async with self.uow:
                inventory = await self.uow.inventory_store.lock_flight_for_update(
                    flight_id=flight_id
                )
                if inventory is None:
                    raise FlightNotFoundError()

                Logger.base.info(
                    f'🔒 [CREATE-BOOKING] Locked flight {flight_id}: '
                    f'{inventory.available_seats} seats left, {seats_requested} requested by user {user_id}'
                )

                # Check and decrement under the same lock
                if not inventory.can_accommodate(seats_requested):
                    raise InsufficientSeatsError()

                await self.uow.inventory_store.decrement_seats(
                    flight_id=flight_id, by=seats_requested
                )

                booking = Booking.confirm(
                    user_id=user_id,
                    inventory=inventory,
                    passengers=passengers,
                    confirmation_code=self.confirmation_code_generator.generate(),
                )
                created = await self.uow.booking_ledger.insert(booking=booking)

                await self.uow.commit()
        except CustomBaseError as e:
            Logger.base.warning(f'↩️  [CREATE-BOOKING] Rolled back flight {flight_id}: {e.message}')
            raise
        except Exception as e:
            Logger.base.error(
                f'💥 [CREATE-BOOKING] Store failure on flight {flight_id}, rolled back: '
                f'{type(e).__name__}: {e}'
            )
            raise BookingFailedError() from e

        Logger.base.info(
            f'✅ [CREATE-BOOKING] Booking {created.id} ({created.confirmation_code}) committed, '
            f'flight {flight_id} now has {inventory.available_seats - seats_requested} seats'
        )

        persisted = await self._read_back(created)

        # Price comes from the locked read, not from the flight's current price
        return attrs.evolve(
            persisted,
            price_per_seat=inventory.price_per_seat,
            total_price=inventory.total_for(seats_requested),
        )

    async def _read_back(self, created: Booking) -> Booking:
        """Post-commit read, falling back to the inserted row (already committed) when it fails."""
        try:
            async with self.uow:
                persisted = await self.uow.booking_ledger.get_by_id(booking_id=created.id or 0)
        except Exception as e:
            Logger.base.warning(
                f'⚠️  [CREATE-BOOKING] Read-back of booking {created.id} failed: {type(e).__name__}: {e}'
            )
            return created
        return persisted or created
