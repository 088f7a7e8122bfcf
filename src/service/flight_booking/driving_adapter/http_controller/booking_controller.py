from fastapi import APIRouter, Depends, status

from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.flight_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.flight_booking.driving_adapter.http_controller.auth.bearer_auth import (
    get_current_user_id,
)
from src.service.flight_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingDetail,
    BookingResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    current_user_id: int = Depends(get_current_user_id),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.create_booking(
        user_id=current_user_id,
        flight_id=request.flight_id,
        passengers=[passenger.to_passenger() for passenger in request.passengers],
        seats_requested=request.seats,
    )
    return BookingResponse(booking=BookingDetail.from_entity(booking))


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: int,
    current_user_id: int = Depends(get_current_user_id),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id)

    if booking.user_id != current_user_id:
        raise ForbiddenError('Forbidden')

    return BookingResponse(booking=BookingDetail.from_entity(booking))
