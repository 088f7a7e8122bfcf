from datetime import date, datetime, time, timedelta, timezone
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_query_repo import IFlightQueryRepo
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel


_SORT_COLUMNS = {
    'price': (FlightModel.price.asc(), FlightModel.departure.asc()),
    'departure': (FlightModel.departure.asc(), FlightModel.price.asc()),
}


class FlightQueryRepoImpl(IFlightQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
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
        stmt = select(FlightModel).where(
            FlightModel.origin == origin,
            FlightModel.destination == destination,
            FlightModel.available_seats >= min_available_seats,
        )
        if departure_date is not None:
            day_start = datetime.combine(departure_date, time.min, tzinfo=timezone.utc)
            stmt = stmt.where(
                FlightModel.departure >= day_start,
                FlightModel.departure < day_start + timedelta(days=1),
            )
        stmt = stmt.order_by(*_SORT_COLUMNS[sort], FlightModel.id).limit(limit).offset(offset)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [self._model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def get_by_id(self, *, flight_id: int) -> Optional[Flight]:
        async with self.session_factory() as session:
            result = await session.execute(select(FlightModel).where(FlightModel.id == flight_id))
            flight_model = result.scalar_one_or_none()

            if not flight_model:
                return None

            return self._model_to_entity(flight_model)

    @staticmethod
    def _model_to_entity(flight_model: FlightModel) -> Flight:
        return Flight(
            id=flight_model.id,
            airline=flight_model.airline,
            airline_code=flight_model.airline_code,
            flight_number=flight_model.flight_number,
            origin=flight_model.origin,
            destination=flight_model.destination,
            departure=flight_model.departure,
            arrival=flight_model.arrival,
            duration=flight_model.duration,
            price=flight_model.price,
            available_seats=flight_model.available_seats,
            operational_days=list(flight_model.operational_days or []),
            raw_meta=dict(flight_model.raw_meta or {}),
        )
