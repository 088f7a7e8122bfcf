from abc import ABC, abstractmethod

from src.service.flight_booking.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        """Raises EmailAlreadyRegisteredError when the email is taken."""
        pass
