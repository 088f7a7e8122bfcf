from pathlib import Path
from typing import Any, List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Flight Booking System'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'flight_booking'
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = None  # Full async URL, overrides POSTGRES_* (tests use sqlite)

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    @property
    def DATABASE_URL_SYNC(self) -> str:
        return self.DATABASE_URL_ASYNC.replace('+asyncpg', '').replace('+aiosqlite', '')

    # Store-side timeouts in milliseconds (0 = disabled), asyncpg only
    DB_STATEMENT_TIMEOUT_MS: int = 0
    DB_LOCK_TIMEOUT_MS: int = 0

    @property
    def DB_CONNECT_ARGS(self) -> dict[str, Any]:
        if not self.DATABASE_URL_ASYNC.startswith('postgresql+asyncpg'):
            return {}
        server_settings: dict[str, str] = {}
        if self.DB_STATEMENT_TIMEOUT_MS:
            server_settings['statement_timeout'] = str(self.DB_STATEMENT_TIMEOUT_MS)
        if self.DB_LOCK_TIMEOUT_MS:
            server_settings['lock_timeout'] = str(self.DB_LOCK_TIMEOUT_MS)
        return {'server_settings': server_settings} if server_settings else {}

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 4 * 60 * 60
    TOKEN_LEEWAY_SECONDS: int = 30

    # Booking
    CONFIRMATION_CODE_PREFIX: str = 'BOOK'
    CONFIRMATION_CODE_RANDOM_BYTES: int = 6

    # Seed data
    FLIGHT_SEED_FILE: Path = _PROJECT_ROOT / 'script' / 'data' / 'flight_data.json'

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []


settings = Settings()  # type: ignore
