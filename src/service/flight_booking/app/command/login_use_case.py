from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_authenticator import IAuthenticator
from src.service.flight_booking.app.interface.i_token_service import ITokenService


@attrs.frozen
class LoginResult:
    token: str = attrs.field(repr=False)
    expires_in: int
    user_id: int


class LoginUseCase:
    def __init__(self, *, authenticator: IAuthenticator, token_service: ITokenService) -> None:
        self.authenticator = authenticator
        self.token_service = token_service

    @classmethod
    @inject
    def depends(
        cls,
        authenticator: IAuthenticator = Depends(Provide[Container.authenticator]),
        token_service: ITokenService = Depends(Provide[Container.token_service]),
    ) -> Self:
        return cls(authenticator=authenticator, token_service=token_service)

    @Logger.io
    async def login(self, *, email: str, password: str) -> LoginResult:
        user_id = await self.authenticator.verify(email=email, password=password)

        ttl_seconds = settings.ACCESS_TOKEN_EXPIRE_SECONDS
        token = self.token_service.issue(claims={'user_id': user_id}, ttl_seconds=ttl_seconds)
        Logger.base.info(f'🔑 [AUTH] Issued token for user {user_id}')

        return LoginResult(token=token, expires_in=ttl_seconds, user_id=user_id)
