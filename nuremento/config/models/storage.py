"""Storage backend settings."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class PostgresConfig(BaseModel):
    """asyncpg pool sizing and timeouts.

    The DSN itself is read from NUREMENTO_DATABASE_URL or DATABASE_URL so
    credentials stay out of config files.
    """

    min_pool_size: int = Field(default=5, gt=0)
    max_pool_size: int = Field(default=20, gt=0)
    max_inactive_connection_lifetime: float = Field(default=300.0, gt=0, description="Seconds")
    command_timeout: float = Field(default=60.0, gt=0, description="Seconds")

    @model_validator(mode="after")
    def check_pool_bounds(self) -> "PostgresConfig":
        if self.min_pool_size > self.max_pool_size:
            raise ValueError("min_pool_size cannot exceed max_pool_size")
        return self


class StorageConfig(BaseModel):
    """Where memories, lake notes, pick state and capsules live.

    inmemory keeps everything in process and loses it on restart.
    """

    backend: Literal["inmemory", "postgres"] = "postgres"
    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
