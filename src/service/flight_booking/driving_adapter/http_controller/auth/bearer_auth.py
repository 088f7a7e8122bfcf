"""
Bearer token authentication for protected routes

    Authorization: Bearer <jwt>

The token is verified statelessly (no user lookup); the ``user_id`` claim
becomes the caller identity passed to the use cases.
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Header

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.service.flight_booking.app.interface.i_token_service import ITokenService


BEARER_SCHEME = 'bearer'


def extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise AuthenticationError('Missing Authorization header')

    scheme, _, token = authorization.strip().partition(' ')
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token:
        raise AuthenticationError('Invalid Authorization header format')
    return token


@inject
async def get_current_user_id(
    authorization: Optional[str] = Header(None),
    token_service: ITokenService = Depends(Provide[Container.token_service]),
) -> int:
    claims = token_service.verify(token=extract_bearer_token(authorization))

    user_id = claims.get('user_id')
    # bool is an int subclass, reject it explicitly
    if not isinstance(user_id, int) or isinstance(user_id, bool) or user_id <= 0:
        raise AuthenticationError('Invalid token payload')
    return user_id
