from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import (
    JSON,
    CheckConstraint,
    DateTime,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


JsonType = JSON().with_variant(JSONB(), 'postgresql')


class FlightModel(Base):
    __tablename__ = 'flight'
    __table_args__ = (
        UniqueConstraint(
            'airline_code', 'flight_number', 'departure', name='uq_flight_code_number_departure'
        ),
        CheckConstraint('available_seats >= 0', name='ck_flight_available_seats_non_negative'),
        CheckConstraint('price >= 0', name='ck_flight_price_non_negative'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    airline: Mapped[str] = mapped_column(String(100), nullable=False)
    airline_code: Mapped[str] = mapped_column(String(10), nullable=False)
    flight_number: Mapped[str] = mapped_column(String(20), nullable=False)
    origin: Mapped[str] = mapped_column(String(3), nullable=False, index=True)
    destination: Mapped[str] = mapped_column(String(3), nullable=False, index=True)
    departure: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    arrival: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    duration: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    available_seats: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    operational_days: Mapped[list[int]] = mapped_column(JsonType, nullable=False, default=list)
    raw_meta: Mapped[dict[str, Any]] = mapped_column(JsonType, nullable=False, default=dict)

    def __repr__(self):
        return (
            f'<FlightModel(id={self.id}, {self.airline_code}{self.flight_number} '
            f'{self.origin}->{self.destination}, seats={self.available_seats})>'
        )
