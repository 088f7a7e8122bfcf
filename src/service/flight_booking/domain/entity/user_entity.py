from datetime import datetime
from typing import Optional

import attrs
from pydantic import SecretStr

from src.service.flight_booking.app.interface.i_password_hasher import IPasswordHasher
from src.service.flight_booking.domain.auth_errors import InvalidRegistrationError


MIN_PASSWORD_LENGTH = 6


@attrs.define
class UserEntity:
    email: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()

    @staticmethod
    def validate_password(plain_password: str) -> None:
        if len(plain_password) < MIN_PASSWORD_LENGTH:
            raise InvalidRegistrationError(
                f'Password must be at least {MIN_PASSWORD_LENGTH} characters'
            )

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        self.validate_password(plain_password)
        self.hashed_password = password_hasher.hash_password(plain_password=SecretStr(plain_password))
