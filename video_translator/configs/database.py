"""
Connection settings for the transcriptions database.

DATABASE_URL wins when set. Hosted providers hand out postgres:// or
postgresql:// URLs; both are rewritten to the asyncpg driver. Without a
URL the POSTGRES_* parts are assembled instead.

Dependencies: pydantic, pydantic_settings
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import SettingsConfigDict

from video_translator.configs.base import BaseSettings

ASYNC_SCHEME = "postgresql+asyncpg://"
SYNC_SCHEMES = ("postgres://", "postgresql://")


def to_async_url(database_url: str) -> str:
    for scheme in SYNC_SCHEMES:
        if database_url.startswith(scheme):
            return ASYNC_SCHEME + database_url[len(scheme):]
    return database_url


class DatabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="POSTGRES_", env_file=".env", extra="ignore")

    url: str | None = Field(default=None, validation_alias=AliasChoices("DATABASE_URL", "POSTGRES_URL"))

    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    db: str = "videotranslator"
    # "require" for managed databases; asyncpg takes it as ?ssl=require
    sslmode: str = "disable"

    pool_size: int = Field(default=10, ge=1)
    max_overflow: int = Field(default=20, ge=0)
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    echo_sql: bool = False

    @field_validator("url")
    @classmethod
    def _use_async_driver(cls, value: str | None) -> str | None:
        return to_async_url(value) if value else value

    @property
    def async_database_url(self) -> str:
        if self.url:
            return self.url
        query = "?ssl=require" if self.sslmode == "require" else ""
        return f"{ASYNC_SCHEME}{self.user}:{self.password}@{self.host}:{self.port}/{self.db}{query}"
