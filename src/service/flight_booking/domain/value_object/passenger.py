from typing import Any, Optional

import attrs

from src.service.flight_booking.domain.booking_errors import InvalidBookingArgumentError


MAX_PASSENGER_AGE = 130


def _validate_name(instance: 'Passenger', attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise InvalidBookingArgumentError('passenger name is required')


def _validate_age(instance: 'Passenger', attribute: attrs.Attribute, value: Optional[int]) -> None:
    if value is not None and not 0 <= value <= MAX_PASSENGER_AGE:
        raise InvalidBookingArgumentError(
            f'passenger age must be between 0 and {MAX_PASSENGER_AGE}'
        )


@attrs.frozen
class Passenger:
    """One traveller on a booking, stored in order inside the booking's passengers column."""

    name: str = attrs.field(validator=_validate_name)
    age: Optional[int] = attrs.field(default=None, validator=_validate_age)
    document_id: Optional[str] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in attrs.asdict(self).items() if value is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Passenger':
        """Restore a stored passenger. Input validators do not run on stored rows."""
        fields = {f.name for f in attrs.fields(cls)}
        with attrs.validators.disabled():
            return cls(**{key: value for key, value in data.items() if key in fields})
