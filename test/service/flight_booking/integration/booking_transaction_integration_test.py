"""
CreateBookingUseCase on SqlAlchemyUnitOfWork against the sqlite test database.

sqlite has no row locks (FOR UPDATE is not rendered), so concurrency is
covered by the unit tests; these tests check the SQL of each step and that
commit and rollback land as one unit.
"""

from decimal import Decimal
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.flight_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.flight_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.flight_booking.domain.booking_errors import (
    FlightNotFoundError,
    InsufficientSeatsError,
)
from src.service.flight_booking.domain.confirmation_code_generator import (
    ConfirmationCodeGenerator,
)
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.domain.value_object.passenger import Passenger
from src.service.flight_booking.driven_adapter.repo.flight_query_repo_impl import (
    FlightQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from test.constants import TEST_EMAIL


@pytest.mark.integration
class TestBookingTransaction:
    @pytest.fixture
    async def user_id(self, session_maker: async_sessionmaker[AsyncSession]) -> int:
        user = await UserCommandRepoImpl(session_factory=session_maker).create(
            user_entity=UserEntity(email=TEST_EMAIL, hashed_password='$2b$12$placeholder')
        )
        return user.id  # type: ignore[return-value]

    async def _seats_left(
        self, session_maker: async_sessionmaker[AsyncSession], flight_id: int
    ) -> int:
        flight = await FlightQueryRepoImpl(session_factory=session_maker).get_by_id(
            flight_id=flight_id
        )
        assert flight is not None
        return flight.available_seats

    async def test_booking_commits_decrement_and_ledger_row(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        seeded_flights: dict[str, dict[str, Any]],
        user_id: int,
    ):
        # Arrange
        flight_id = seeded_flights['GA402']['id']
        travellers = [
            Passenger(name='Ada Lovelace', age=36, document_id='P1'),
            Passenger(name='Charles Babbage', age=79),
        ]

        # Act
        async with session_maker() as session:
            booking = await CreateBookingUseCase(
                uow=SqlAlchemyUnitOfWork(session),
                confirmation_code_generator=ConfirmationCodeGenerator(),
            ).create_booking(
                user_id=user_id, flight_id=flight_id, passengers=travellers, seats_requested=2
            )

        # Assert
        assert booking.id is not None
        assert booking.created_at is not None
        assert booking.total_price == Decimal('300.00')
        assert await self._seats_left(session_maker, flight_id) == 8

        async with session_maker() as session:
            stored = await GetBookingUseCase(uow=SqlAlchemyUnitOfWork(session)).get_booking(
                booking_id=booking.id
            )
        assert stored.passengers == travellers
        assert stored.seats_booked == 2
        assert stored.confirmation_code == booking.confirmation_code
        assert stored.price_per_seat == Decimal('150.00')
        assert stored.total_price == Decimal('300.00')

    async def test_insufficient_seats_rolls_back(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        seeded_flights: dict[str, dict[str, Any]],
        user_id: int,
    ):
        # Arrange
        flight_id = seeded_flights['JT34']['id']

        # Act & Assert
        async with session_maker() as session:
            with pytest.raises(InsufficientSeatsError):
                await CreateBookingUseCase(
                    uow=SqlAlchemyUnitOfWork(session),
                    confirmation_code_generator=ConfirmationCodeGenerator(),
                ).create_booking(
                    user_id=user_id,
                    flight_id=flight_id,
                    passengers=[Passenger(name=f'p{i}') for i in range(3)],
                    seats_requested=3,
                )

        assert await self._seats_left(session_maker, flight_id) == 2

    async def test_missing_flight(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        seeded_flights: dict[str, dict[str, Any]],
        user_id: int,
    ):
        async with session_maker() as session:
            with pytest.raises(FlightNotFoundError):
                await CreateBookingUseCase(
                    uow=SqlAlchemyUnitOfWork(session),
                    confirmation_code_generator=ConfirmationCodeGenerator(),
                ).create_booking(
                    user_id=user_id,
                    flight_id=999_999,
                    passengers=[Passenger(name='p1')],
                    seats_requested=1,
                )

    async def test_last_seats_then_sold_out(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        seeded_flights: dict[str, dict[str, Any]],
        user_id: int,
    ):
        flight_id = seeded_flights['JT34']['id']

        for expected_left in (1, 0):
            async with session_maker() as session:
                await CreateBookingUseCase(
                    uow=SqlAlchemyUnitOfWork(session),
                    confirmation_code_generator=ConfirmationCodeGenerator(),
                ).create_booking(
                    user_id=user_id,
                    flight_id=flight_id,
                    passengers=[Passenger(name='p1')],
                    seats_requested=1,
                )
            assert await self._seats_left(session_maker, flight_id) == expected_left

        async with session_maker() as session:
            with pytest.raises(InsufficientSeatsError):
                await CreateBookingUseCase(
                    uow=SqlAlchemyUnitOfWork(session),
                    confirmation_code_generator=ConfirmationCodeGenerator(),
                ).create_booking(
                    user_id=user_id,
                    flight_id=flight_id,
                    passengers=[Passenger(name='p1')],
                    seats_requested=1,
                )
