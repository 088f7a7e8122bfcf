from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.flight_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.flight_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.flight_booking.app.query.search_flights_use_case import (
    MAX_LIMIT,
    SearchFlightsUseCase,
)
from src.service.flight_booking.domain.booking_errors import (
    BookingNotFoundError,
    FlightNotFoundError,
)
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.domain.value_object.passenger import Passenger
from test.service.flight_booking.unit.helpers import (
    InMemoryFlightStore,
    InMemoryUnitOfWork,
    SequentialCodeGenerator,
)


@pytest.mark.unit
class TestGetBookingUseCase:
    @pytest.fixture
    def store(self) -> InMemoryFlightStore:
        flight_store = InMemoryFlightStore()
        flight_store.add_flight(flight_id=1, seats=5, price='75.00')
        return flight_store

    async def test_returns_booking_with_passengers_in_order(self, store: InMemoryFlightStore):
        # Arrange
        travellers = [Passenger(name='First', age=1), Passenger(name='Second', document_id='D2')]
        created = await CreateBookingUseCase(
            uow=InMemoryUnitOfWork(store), confirmation_code_generator=SequentialCodeGenerator()
        ).create_booking(user_id=3, flight_id=1, passengers=travellers, seats_requested=2)
        use_case = GetBookingUseCase(uow=InMemoryUnitOfWork(store))

        # Act
        first = await use_case.get_booking(booking_id=created.id)  # type: ignore[arg-type]
        second = await use_case.get_booking(booking_id=created.id)  # type: ignore[arg-type]

        # Assert
        assert first.passengers == travellers
        assert first.user_id == 3
        assert first == second

    async def test_unknown_id_raises_not_found(self, store: InMemoryFlightStore):
        use_case = GetBookingUseCase(uow=InMemoryUnitOfWork(store))

        with pytest.raises(BookingNotFoundError) as exc_info:
            await use_case.get_booking(booking_id=12345)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == 'Booking not found'


@pytest.fixture
def flight_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.search.return_value = []
    repo.get_by_id.return_value = None
    return repo


@pytest.fixture
def search_use_case(flight_query_repo: AsyncMock) -> SearchFlightsUseCase:
    return SearchFlightsUseCase(flight_query_repo=flight_query_repo)


@pytest.mark.unit
class TestSearchFlightsUseCase:
    async def test_normalizes_and_forwards_filters(
        self, search_use_case: SearchFlightsUseCase, flight_query_repo: AsyncMock
    ):
        await search_use_case.search(
            origin=' cgk ',
            destination='dps',
            departure_date='2025-12-01',
            passengers=2,
            sort='departure',
            limit=10,
            offset=20,
        )

        flight_query_repo.search.assert_awaited_once_with(
            origin='CGK',
            destination='DPS',
            departure_date=date(2025, 12, 1),
            min_available_seats=2,
            sort='departure',
            limit=10,
            offset=20,
        )

    @pytest.mark.parametrize('limit,expected', [(0, 1), (-5, 1), (50, 50), (10_000, MAX_LIMIT)])
    async def test_limit_is_clamped(
        self,
        search_use_case: SearchFlightsUseCase,
        flight_query_repo: AsyncMock,
        limit: int,
        expected: int,
    ):
        await search_use_case.search(origin='CGK', destination='DPS', limit=limit)

        assert flight_query_repo.search.await_args.kwargs['limit'] == expected

    @pytest.mark.parametrize(
        'kwargs,message',
        [
            ({'origin': 'JAKARTA'}, 'origin and destination must be 3-letter IATA codes'),
            ({'destination': 'D1S'}, 'origin and destination must be 3-letter IATA codes'),
            ({'departure_date': '01-12-2025'}, 'date must be in YYYY-MM-DD format'),
            ({'passengers': 0}, 'passengers must be > 0'),
            ({'sort': 'duration'}, 'sort must be one of: price, departure'),
            ({'offset': -1}, 'offset must be >= 0'),
        ],
    )
    async def test_invalid_filters_rejected(
        self,
        search_use_case: SearchFlightsUseCase,
        flight_query_repo: AsyncMock,
        kwargs: dict,
        message: str,
    ):
        params = {'origin': 'CGK', 'destination': 'DPS'} | kwargs

        with pytest.raises(DomainError) as exc_info:
            await search_use_case.search(**params)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == message
        flight_query_repo.search.assert_not_awaited()

    async def test_get_flight(self, search_use_case: SearchFlightsUseCase, flight_query_repo: AsyncMock):
        flight = Flight(
            id=1,
            airline='Garuda Indonesia',
            airline_code='GA',
            flight_number='GA402',
            origin='CGK',
            destination='DPS',
            departure=datetime(2025, 12, 1, 6, tzinfo=timezone.utc),
            arrival=None,
            price=Decimal('150.00'),
            available_seats=10,
        )
        flight_query_repo.get_by_id.return_value = flight

        assert await search_use_case.get_flight(flight_id=1) is flight

    async def test_get_missing_flight_raises_not_found(self, search_use_case: SearchFlightsUseCase):
        with pytest.raises(FlightNotFoundError):
            await search_use_case.get_flight(flight_id=404)
