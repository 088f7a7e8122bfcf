from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.service.flight_booking.driven_adapter.model.flight_model import JsonType


class BookingModel(Base):
    __tablename__ = 'booking'
    __table_args__ = (CheckConstraint('seats_booked > 0', name='ck_booking_seats_positive'),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id', ondelete='RESTRICT'), nullable=False, index=True
    )
    flight_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('flight.id', ondelete='RESTRICT'), nullable=False, index=True
    )
    passengers: Mapped[list[dict[str, Any]]] = mapped_column(JsonType, nullable=False)
    seats_booked: Mapped[int] = mapped_column(Integer, nullable=False)
    confirmation_code: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='CONFIRMED')
    price_per_seat: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    total_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self):
        return (
            f'<BookingModel(id={self.id}, user_id={self.user_id}, flight_id={self.flight_id}, '
            f'seats={self.seats_booked}, code={self.confirmation_code})>'
        )
