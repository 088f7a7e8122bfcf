import secrets
import time
from typing import Callable, Optional

from src.platform.config.core_setting import settings
from src.service.flight_booking.app.interface.i_confirmation_code_generator import (
    IConfirmationCodeGenerator,
)


class ConfirmationCodeGenerator(IConfirmationCodeGenerator):
    """
    Customer-facing booking reference: ``<prefix>-<random hex>-<unix seconds>``

    e.g. ``BOOK-9f2c4e01ab33-1767225600``. Uniqueness is probabilistic
    (48 random bits per second by default), the store is never consulted.
    Not a secret and never used for authorization.
    """

    def __init__(
        self,
        *,
        prefix: Optional[str] = None,
        random_bytes: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.prefix = prefix or settings.CONFIRMATION_CODE_PREFIX
        self.random_bytes = random_bytes or settings.CONFIRMATION_CODE_RANDOM_BYTES
        self._clock = clock

    def generate(self) -> str:
        return f'{self.prefix}-{secrets.token_hex(self.random_bytes)}-{int(self._clock())}'
