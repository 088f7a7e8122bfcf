from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_authenticator import IAuthenticator
from src.service.flight_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.flight_booking.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.flight_booking.domain.auth_errors import InvalidCredentialsError
from src.service.flight_booking.domain.entity.user_entity import UserEntity


class PasswordAuthenticator(IAuthenticator):
    """Email + password check against the user table."""

    def __init__(self, *, user_query_repo: IUserQueryRepo, password_hasher: IPasswordHasher) -> None:
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher

    @Logger.io
    async def verify(self, *, email: str, password: str) -> int:
        user = await self.user_query_repo.get_by_email(email=UserEntity.normalize_email(email))
        # Same error for unknown email and wrong password
        if user is None or user.id is None:
            raise InvalidCredentialsError()
        if not self.password_hasher.verify_password(
            plain_password=SecretStr(password), hashed_password=user.hashed_password
        ):
            raise InvalidCredentialsError()
        return user.id
