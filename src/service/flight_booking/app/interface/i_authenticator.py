from abc import ABC, abstractmethod


class IAuthenticator(ABC):
    @abstractmethod
    async def verify(self, *, email: str, password: str) -> int:
        """Return the user id, or raise InvalidCredentialsError."""
        pass
