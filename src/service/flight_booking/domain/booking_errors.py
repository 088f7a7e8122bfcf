from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
)


class InvalidBookingArgumentError(DomainError):
    """Rejected before any transaction is opened"""


class FlightNotFoundError(NotFoundError):
    def __init__(self, message: str = 'Flight not found') -> None:
        super().__init__(message)


class InsufficientSeatsError(ConflictError):
    def __init__(self, message: str = 'Not enough seats available') -> None:
        super().__init__(message)


class BookingNotFoundError(NotFoundError):
    def __init__(self, message: str = 'Booking not found') -> None:
        super().__init__(message)


class BookingFailedError(InternalError):
    """Store failure inside the booking transaction, raised after rollback"""

    def __init__(self, message: str = 'Booking failed') -> None:
        super().__init__(message)
