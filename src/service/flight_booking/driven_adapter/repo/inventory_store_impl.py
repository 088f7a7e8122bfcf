from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_inventory_store import IInventoryStore
from src.service.flight_booking.domain.value_object.flight_inventory import FlightInventory
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel


class InventoryStoreImpl(IInventoryStore):
    """Row-locked seat inventory on the unit of work's session."""

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def lock_flight_for_update(self, *, flight_id: int) -> Optional[FlightInventory]:
        # SELECT ... FOR UPDATE: concurrent bookings of this flight queue here
        result = await self.session.execute(
            select(FlightModel.id, FlightModel.available_seats, FlightModel.price)
            .where(FlightModel.id == flight_id)
            .with_for_update()
        )
        row = result.one_or_none()
        if row is None:
            return None

        return FlightInventory(
            flight_id=row.id,
            available_seats=row.available_seats,
            price_per_seat=row.price,
        )

    @Logger.io
    async def decrement_seats(self, *, flight_id: int, by: int) -> None:
        await self.session.execute(
            update(FlightModel)
            .where(FlightModel.id == flight_id)
            .values(available_seats=FlightModel.available_seats - by)
        )
