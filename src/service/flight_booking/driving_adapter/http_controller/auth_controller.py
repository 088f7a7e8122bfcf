from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.command.login_use_case import LoginUseCase
from src.service.flight_booking.app.command.register_user_use_case import RegisterUserUseCase
from src.service.flight_booking.driving_adapter.http_controller.schema.user_schema import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)


router = APIRouter()


@router.post('/register', status_code=status.HTTP_201_CREATED)
@Logger.io
async def register(
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
) -> RegisterResponse:
    user = await use_case.register(
        email=request.email, password=request.password.get_secret_value()
    )
    return RegisterResponse(user_id=user.id or 0)


@router.post('/login')
@Logger.io
async def login(
    request: LoginRequest,
    use_case: LoginUseCase = Depends(LoginUseCase.depends),
) -> LoginResponse:
    result = await use_case.login(
        email=request.email, password=request.password.get_secret_value()
    )
    return LoginResponse(token=result.token, expires_in=result.expires_in, user_id=result.user_id)
