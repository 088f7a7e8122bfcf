"""
Unit of Work Pattern - one database transaction per booking

Architecture:
- UoW owns the session for the lifetime of one transaction
- UoW is the only place that commits or rolls back
- Inventory store and booking ledger share the UoW session, so the seat
  decrement and the ledger insert land in the same transaction
- Leaving the ``async with`` block without commit() rolls back, so every
  exit path except a successful commit leaves the store untouched
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from src.service.flight_booking.app.interface.i_booking_ledger import IBookingLedger
    from src.service.flight_booking.app.interface.i_inventory_store import IInventoryStore


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the booking transaction

    Usage:
        async with uow:
            inventory = await uow.inventory_store.lock_flight_for_update(flight_id=...)
            await uow.inventory_store.decrement_seats(flight_id=..., by=...)
            booking = await uow.booking_ledger.insert(booking=...)
            await uow.commit()
    """

    inventory_store: IInventoryStore
    booking_ledger: IBookingLedger

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        # No-op after a successful commit, undoes everything otherwise
        await self.rollback()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy implementation of Unit of Work"""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.flight_booking.driven_adapter.repo.booking_ledger_impl import (
            BookingLedgerImpl,
        )
        from src.service.flight_booking.driven_adapter.repo.inventory_store_impl import (
            InventoryStoreImpl,
        )

        # Both stores operate on the shared session (same transaction)
        self.inventory_store = InventoryStoreImpl(session=self.session)
        self.booking_ledger = BookingLedgerImpl(session=self.session)

        return await super().__aenter__()

    async def _commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """
    FastAPI dependency for Unit of Work

    Session cleanup (returning the connection to the pool) is handled by
    the get_async_session context manager once the request finishes.
    """
    return SqlAlchemyUnitOfWork(session)
