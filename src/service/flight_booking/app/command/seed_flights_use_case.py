from typing import Any, Iterable

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_flight_command_repo import IFlightCommandRepo
from src.service.flight_booking.domain.entity.flight_entity import Flight
from src.service.flight_booking.domain.flight_record_parser import parse_flight_record


@attrs.frozen
class SeedResult:
    upserted: int
    skipped: int


class SeedFlightsUseCase:
    def __init__(self, *, flight_command_repo: IFlightCommandRepo, batch_size: int = 500) -> None:
        self.flight_command_repo = flight_command_repo
        self.batch_size = batch_size

    @Logger.io(truncate_content=True)
    async def seed(self, *, records: Iterable[dict[str, Any]]) -> SeedResult:
        flights: list[Flight] = []
        skipped = 0
        for index, record in enumerate(records):
            flight = parse_flight_record(record) if isinstance(record, dict) else None
            if flight is None:
                Logger.base.warning(f'⚠️  [SEED] Skipping entry #{index}: missing or invalid field(s)')
                skipped += 1
                continue
            flights.append(flight)

        # The same flight twice in one INSERT ... ON CONFLICT is rejected by postgres
        unique: dict[tuple[str, str, Any], Flight] = {
            (f.airline_code, f.flight_number, f.departure): f for f in flights
        }
        batch = list(unique.values())

        upserted = 0
        for start in range(0, len(batch), self.batch_size):
            upserted += await self.flight_command_repo.upsert_many(
                flights=batch[start : start + self.batch_size]
            )

        Logger.base.info(f'🌱 [SEED] Upserted {upserted} flights, skipped {skipped}')
        return SeedResult(upserted=upserted, skipped=skipped)
