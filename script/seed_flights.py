#!/usr/bin/env python3
"""
Flight Seed Script
Load the flight catalogue from JSON into the flight table

Usage:
    python -m script.seed_flights [path/to/flights.json]

Notes:
- Defaults to settings.FLIGHT_SEED_FILE
- Upserts on (airline_code, flight_number, departure), so re-running refreshes
  price, seats, operational days and raw_meta instead of duplicating flights
- Entries missing required fields are skipped with a warning
"""

import asyncio
from pathlib import Path
import sys

import orjson

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.database.orm_db_setting import dispose_engine
from src.service.flight_booking.app.command.seed_flights_use_case import SeedFlightsUseCase


def _load_records(path: Path) -> list[dict]:
    if not path.exists():
        raise FileNotFoundError(f'JSON file not found: {path}')
    data = orjson.loads(path.read_bytes())
    if not isinstance(data, list):
        raise ValueError('JSON invalid or top-level not an array')
    return data


async def main(path: Path) -> None:
    print(f'🌱 Seeding flights from {path}')
    print('=' * 50)

    try:
        records = _load_records(path)
        use_case = SeedFlightsUseCase(flight_command_repo=container.flight_command_repo())
        result = await use_case.seed(records=records)
        print(f'✅ Seed complete. Inserted/Updated {result.upserted} flights, skipped {result.skipped}.')
    except Exception as e:
        print(f'❌ Seed failed: {e}')
        sys.exit(1)
    finally:
        await dispose_engine()


if __name__ == '__main__':
    seed_path = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.FLIGHT_SEED_FILE
    asyncio.run(main(seed_path))
