"""
Maps raw flight catalogue records (seed JSON) onto Flight entities.

Accepted key variants:
    airline | airlineName, airlineCode | carrierCode, flightNumber | flight_number,
    availableSeats | available_seats, operationalDays | operational_days

Keys that are not mapped onto a column are kept in ``raw_meta``.
"""

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
import re
from typing import Any, Optional

from src.service.flight_booking.domain.entity.flight_entity import Flight


_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    'airline': ('airline', 'airlineName'),
    'airline_code': ('airlineCode', 'carrierCode', 'airline_code'),
    'flight_number': ('flightNumber', 'flight_number'),
    'origin': ('origin',),
    'destination': ('destination',),
    'departure': ('departure',),
    'arrival': ('arrival',),
    'duration': ('duration',),
    'price': ('price',),
    'available_seats': ('availableSeats', 'available_seats'),
    'operational_days': ('operationalDays', 'operational_days'),
}
_MAPPED_KEYS = frozenset(key for aliases in _KEY_ALIASES.values() for key in aliases)
_DAY_SEPARATORS = re.compile(r'[,|\s;]+')


def _pick(item: dict[str, Any], field: str) -> Any:
    for key in _KEY_ALIASES[field]:
        if item.get(key) not in (None, ''):
            return item[key]
    return None


def parse_datetime(value: Any) -> Optional[datetime]:
    """ISO 8601 string or unix seconds -> aware UTC datetime. None if unparseable."""
    if value in (None, ''):
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    text = str(value).strip()
    if text.isdigit():
        return datetime.fromtimestamp(int(text), tz=timezone.utc)
    try:
        parsed = datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _to_day(value: Any) -> Optional[int]:
    try:
        return int(float(str(value).strip())) % 7  # 7 -> 0 (Sunday)
    except (OverflowError, ValueError):
        return None


def normalize_operational_days(value: Any) -> list[int]:
    """List, single number or separated string -> sorted unique days 0..6 (0 = Sunday)."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        candidates = list(value)
    elif isinstance(value, str):
        candidates = [part for part in _DAY_SEPARATORS.split(value.strip()) if part]
    else:
        candidates = [value]

    days = {_to_day(c) for c in candidates if c not in (None, '')}
    return sorted(day for day in days if day is not None)


def parse_flight_record(item: dict[str, Any]) -> Optional[Flight]:
    """None when a required field (airline, code, number, route, departure) is missing."""
    airline = _pick(item, 'airline')
    airline_code = _pick(item, 'airline_code')
    flight_number = _pick(item, 'flight_number')
    origin = _pick(item, 'origin')
    destination = _pick(item, 'destination')
    departure = parse_datetime(_pick(item, 'departure'))

    if not all((airline, airline_code, flight_number, origin, destination, departure)):
        return None

    try:
        price = Decimal(str(_pick(item, 'price') or 0)).quantize(Decimal('0.01'))
        seats = int(_pick(item, 'available_seats') or 0)
    except (InvalidOperation, TypeError, ValueError):
        return None
    duration = _pick(item, 'duration')

    return Flight(
        airline=str(airline),
        airline_code=str(airline_code).strip().upper(),
        flight_number=str(flight_number),
        origin=str(origin).strip().upper(),
        destination=str(destination).strip().upper(),
        departure=departure,  # type: ignore[arg-type]
        arrival=parse_datetime(_pick(item, 'arrival')),
        duration=None if duration is None else str(duration),
        price=max(price, Decimal('0.00')),
        available_seats=max(seats, 0),
        operational_days=normalize_operational_days(_pick(item, 'operational_days')),
        raw_meta={key: value for key, value in item.items() if key not in _MAPPED_KEYS},
    )
