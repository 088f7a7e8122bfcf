from abc import ABC, abstractmethod
from typing import Any


class ITokenService(ABC):
    @abstractmethod
    def issue(self, *, claims: dict[str, Any], ttl_seconds: int) -> str:
        pass

    @abstractmethod
    def verify(self, *, token: str) -> dict[str, Any]:
        """Return the claims, or raise InvalidTokenError."""
        pass
