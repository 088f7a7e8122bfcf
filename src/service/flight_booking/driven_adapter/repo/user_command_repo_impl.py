from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.flight_booking.domain.auth_errors import EmailAlreadyRegisteredError
from src.service.flight_booking.domain.entity.user_entity import UserEntity
from src.service.flight_booking.driven_adapter.model.user_model import UserModel


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
            )
            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                # Unique index on email, two registrations raced past the pre-check
                await session.rollback()
                raise EmailAlreadyRegisteredError() from e
            await session.refresh(user_model)

            return UserEntity(
                id=user_model.id,
                email=user_model.email,
                hashed_password=user_model.hashed_password,
                created_at=user_model.created_at,
            )
