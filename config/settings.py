from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # PostgreSQL (store of record)
    PG_HOST: str = "localhost"
    PG_PORT: int = 5432
    PG_DATABASE: str = "myapp"
    PG_USER: str = "postgres"
    PG_PASSWORD: str = "postgres"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 10

    # Redis (lookaside cache). REDIS_URL wins over host/port when set.
    REDIS_URL: str | None = None
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379

    # Cache
    CACHE_BACKEND: Literal["redis", "memory"] = "redis"
    CACHE_TTL_SECONDS: int = Field(300, gt=0)

    # App
    APP_NAME: str = "User Cache Service"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DEBUG: bool = False  # echoes SQL when True
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        url = URL.create(
            "postgresql+asyncpg",
            username=self.PG_USER,
            password=self.PG_PASSWORD,
            host=self.PG_HOST,
            port=self.PG_PORT,
            database=self.PG_DATABASE,
        )
        return url.render_as_string(hide_password=False)

    @property
    def redis_url(self) -> str:
        if self.REDIS_URL:
            return self.REDIS_URL
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/0"


settings = Settings()
