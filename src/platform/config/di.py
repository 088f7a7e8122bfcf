"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.flight_booking.domain.confirmation_code_generator import (
    ConfirmationCodeGenerator,
)
from src.service.flight_booking.driven_adapter.repo.flight_command_repo_impl import (
    FlightCommandRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.flight_query_repo_impl import (
    FlightQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.user_query_repo_impl import (
    UserQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.flight_booking.driven_adapter.security.jwt_token_service import (
    JwtTokenService,
)
from src.service.flight_booking.driven_adapter.security.password_authenticator import (
    PasswordAuthenticator,
)


class Container(containers.DeclarativeContainer):
    # Database (event-loop-aware session factory for read repositories)
    database = providers.Singleton(Database)

    # Repositories (stateless - open a session per call through session_factory)
    flight_query_repo = providers.Singleton(
        FlightQueryRepoImpl, session_factory=database.provided.session
    )
    flight_command_repo = providers.Singleton(
        FlightCommandRepoImpl, session_factory=database.provided.session
    )
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    authenticator = providers.Singleton(
        PasswordAuthenticator,
        user_query_repo=user_query_repo,
        password_hasher=password_hasher,
    )
    token_service = providers.Singleton(JwtTokenService)

    # Booking
    confirmation_code_generator = providers.Singleton(ConfirmationCodeGenerator)


container = Container()
