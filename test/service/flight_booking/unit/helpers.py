"""
In-memory stand-ins for the booking transaction.

InMemoryFlightStore holds committed state. Each InMemoryUnitOfWork stages its
writes and holds a per-flight asyncio.Lock from lock_flight_for_update until
commit or rollback, the same way a row lock is held by a database transaction.
"""

import asyncio
from datetime import datetime, timezone
from decimal import Decimal
import itertools
from typing import Optional

import attrs

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.flight_booking.app.interface.i_booking_ledger import IBookingLedger
from src.service.flight_booking.app.interface.i_confirmation_code_generator import (
    IConfirmationCodeGenerator,
)
from src.service.flight_booking.app.interface.i_inventory_store import IInventoryStore
from src.service.flight_booking.domain.entity.booking_entity import Booking
from src.service.flight_booking.domain.value_object.flight_inventory import FlightInventory


class StoreFailure(Exception):
    """Simulated infrastructure failure (connection drop, lock timeout...)"""


class InMemoryFlightStore:
    def __init__(self) -> None:
        self.seats: dict[int, int] = {}
        self.prices: dict[int, Decimal] = {}
        self.bookings: dict[int, Booking] = {}
        self.locks: dict[int, asyncio.Lock] = {}
        self._ids = itertools.count(1)

        # Failure injection: name of the step that raises StoreFailure
        self.fail_on: Optional[str] = None
        self.lock_calls = 0

    def add_flight(self, *, flight_id: int, seats: int, price: str) -> None:
        self.seats[flight_id] = seats
        self.prices[flight_id] = Decimal(price)
        self.locks[flight_id] = asyncio.Lock()

    def next_booking_id(self) -> int:
        return next(self._ids)

    def maybe_fail(self, step: str) -> None:
        if self.fail_on == step:
            raise StoreFailure(f'simulated failure on {step}')


class InMemoryInventoryStore(IInventoryStore):
    def __init__(self, uow: 'InMemoryUnitOfWork') -> None:
        self.uow = uow

    async def lock_flight_for_update(self, *, flight_id: int) -> Optional[FlightInventory]:
        store = self.uow.store
        store.lock_calls += 1
        store.maybe_fail('lock')
        if flight_id not in store.seats:
            return None

        if flight_id not in self.uow.held_locks:
            await store.locks[flight_id].acquire()
            self.uow.held_locks.add(flight_id)

        # Give waiting transactions a chance to run while the lock is held
        await asyncio.sleep(0)
        return FlightInventory(
            flight_id=flight_id,
            available_seats=store.seats[flight_id] - self.uow.staged_decrements.get(flight_id, 0),
            price_per_seat=store.prices[flight_id],
        )

    async def decrement_seats(self, *, flight_id: int, by: int) -> None:
        store = self.uow.store
        store.maybe_fail('decrement')
        assert flight_id in self.uow.held_locks, 'decrement without holding the row lock'
        remaining = store.seats[flight_id] - self.uow.staged_decrements.get(flight_id, 0) - by
        if remaining < 0:
            raise StoreFailure('check constraint available_seats >= 0 violated')
        self.uow.staged_decrements[flight_id] = self.uow.staged_decrements.get(flight_id, 0) + by


class InMemoryBookingLedger(IBookingLedger):
    def __init__(self, uow: 'InMemoryUnitOfWork') -> None:
        self.uow = uow

    async def insert(self, *, booking: Booking) -> Booking:
        self.uow.store.maybe_fail('insert')
        created = attrs.evolve(
            booking,
            id=self.uow.store.next_booking_id(),
            created_at=datetime.now(timezone.utc),
            passengers=list(booking.passengers),
        )
        self.uow.staged_bookings.append(created)
        return created

    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        self.uow.store.maybe_fail('read')
        for booking in self.uow.staged_bookings:
            if booking.id == booking_id:
                return booking
        return self.uow.store.bookings.get(booking_id)


class InMemoryUnitOfWork(AbstractUnitOfWork):
    def __init__(self, store: InMemoryFlightStore) -> None:
        self.store = store
        self.held_locks: set[int] = set()
        self.staged_decrements: dict[int, int] = {}
        self.staged_bookings: list[Booking] = []
        self.commits = 0
        self.rollbacks = 0
        self.inventory_store = InMemoryInventoryStore(self)
        self.booking_ledger = InMemoryBookingLedger(self)

    async def _commit(self) -> None:
        self.store.maybe_fail('commit')
        for flight_id, by in self.staged_decrements.items():
            self.store.seats[flight_id] -= by
        for booking in self.staged_bookings:
            self.store.bookings[booking.id] = booking  # type: ignore[index]
        self.commits += 1
        self._end_transaction()

    async def rollback(self) -> None:
        if self.held_locks or self.staged_decrements or self.staged_bookings:
            self.rollbacks += 1
        self._end_transaction()

    def _end_transaction(self) -> None:
        self.staged_decrements = {}
        self.staged_bookings = []
        for flight_id in self.held_locks:
            self.store.locks[flight_id].release()
        self.held_locks = set()


class SequentialCodeGenerator(IConfirmationCodeGenerator):
    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def generate(self) -> str:
        return f'BOOK-{next(self._counter):012x}-1767225600'
