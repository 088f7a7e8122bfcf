from typing import AsyncContextManager, Callable, List

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel


_CONFLICT_COLUMNS = ('airline_code', 'flight_number', 'departure')
_UPDATED_COLUMNS = ('price', 'available_seats', 'operational_days', 'raw_meta')


class FlightCommandRepoImpl(IFlightCommandRepo):
    """Administrative reseed of the flight catalogue (the only writer besides bookings)."""

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def upsert_many(self, *, flights: List[Flight]) -> int:
        if not flights:
            return 0

        rows = [
            {
                'airline': flight.airline,
                'airline_code': flight.airline_code,
                'flight_number': flight.flight_number,
                'origin': flight.origin,
                'destination': flight.destination,
                'departure': flight.departure,
                'arrival': flight.arrival,
                'duration': flight.duration,
                'price': flight.price,
                'available_seats': flight.available_seats,
                'operational_days': flight.operational_days,
                'raw_meta': flight.raw_meta,
            }
            for flight in flights
        ]

        async with self.session_factory() as session:
            insert = pg_insert if session.get_bind().dialect.name == 'postgresql' else sqlite_insert
            stmt = insert(FlightModel).values(rows)
            stmt = stmt.on_conflict_do_update(
                index_elements=list(_CONFLICT_COLUMNS),
                set_={column: stmt.excluded[column] for column in _UPDATED_COLUMNS},
            )
            await session.execute(stmt)
            await session.commit()

        return len(rows)
