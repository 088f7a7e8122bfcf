from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

import attrs


@attrs.define
class Flight:
    airline: str
    airline_code: str
    flight_number: str
    origin: str
    destination: str
    departure: datetime
    arrival: Optional[datetime]
    price: Decimal
    available_seats: int
    duration: Optional[str] = None
    operational_days: List[int] = attrs.field(factory=list)
    raw_meta: dict[str, Any] = attrs.field(factory=dict)
    id: Optional[int] = None
