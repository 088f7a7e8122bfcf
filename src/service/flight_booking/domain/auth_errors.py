from src.platform.exception.exceptions import AuthenticationError, ConflictError, DomainError


class InvalidCredentialsError(AuthenticationError):
    def __init__(self, message: str = 'Invalid credentials') -> None:
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f'Invalid token: {reason}')


class EmailAlreadyRegisteredError(ConflictError):
    def __init__(self, message: str = 'Email already registered') -> None:
        super().__init__(message)


class InvalidRegistrationError(DomainError):
    pass
