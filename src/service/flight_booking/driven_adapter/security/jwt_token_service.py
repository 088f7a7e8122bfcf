"""
HS256 JSON Web Tokens.

Tokens are ``base64url(header).base64url(payload).base64url(signature)``,
signature = HMAC-SHA256 over the first two segments with SECRET_KEY.
``iat`` is always stamped on issue, ``exp`` is ``iat + ttl`` unless the
caller supplied one. Verification tolerates TOKEN_LEEWAY_SECONDS of clock
drift on ``exp`` and ``nbf``.
"""

import time
from typing import Any, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_token_service import ITokenService
from src.service.flight_booking.domain.auth_errors import InvalidTokenError


class JwtTokenService(ITokenService):
    def __init__(
        self,
        *,
        secret: Optional[str] = None,
        algorithm: Optional[str] = None,
        leeway_seconds: Optional[int] = None,
    ) -> None:
        self.secret = secret or settings.SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.ALGORITHM
        self.leeway_seconds = (
            settings.TOKEN_LEEWAY_SECONDS if leeway_seconds is None else leeway_seconds
        )

    @Logger.io
    def issue(self, *, claims: dict[str, Any], ttl_seconds: int) -> str:
        now = int(time.time())
        payload = dict(claims)
        payload['iat'] = now
        payload.setdefault('exp', now + ttl_seconds)
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    @Logger.io
    def verify(self, *, token: str) -> dict[str, Any]:
        try:
            header = jwt.get_unverified_header(token)
        except jwt.DecodeError as e:
            raise InvalidTokenError('Invalid token structure') from e
        if header.get('alg') != self.algorithm:
            raise InvalidTokenError('Unsupported algorithm')

        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'verify_exp': False, 'verify_nbf': False, 'verify_iat': False},
            )
        except jwt.InvalidSignatureError as e:
            raise InvalidTokenError('Invalid token signature') from e
        except jwt.DecodeError as e:
            raise InvalidTokenError('Invalid token structure') from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e)) from e

        self._check_time_claims(payload)
        return payload

    def _check_time_claims(self, payload: dict[str, Any]) -> None:
        # Boundaries are inclusive: exp == now - leeway and nbf == now + leeway still pass
        now = int(time.time())
        try:
            exp = int(payload['exp']) if 'exp' in payload else None
            nbf = int(payload['nbf']) if 'nbf' in payload else None
        except (TypeError, ValueError) as e:
            raise InvalidTokenError('Invalid token payload') from e

        if exp is not None and now - self.leeway_seconds > exp:
            raise InvalidTokenError('Token expired')
        if nbf is not None and now + self.leeway_seconds < nbf:
            raise InvalidTokenError('Token not yet valid')
