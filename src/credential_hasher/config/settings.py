"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
PositiveInt = Annotated[int, Field(gt=0)]
PortInt = Annotated[int, Field(gt=0, lt=65536)]

DEFAULT_DECOY_PASSWORD = "decoy-password-for-unknown-accounts"


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    hash_memory_cost_kib: PositiveInt = Field(
        default=19_456,
        validation_alias="HASH_MEMORY_COST_KIB",
    )
    hash_time_cost: PositiveInt = Field(default=2, validation_alias="HASH_TIME_COST")
    hash_parallelism: PositiveInt = Field(default=1, validation_alias="HASH_PARALLELISM")
    hash_length: PositiveInt = Field(default=32, validation_alias="HASH_LENGTH")
    hash_salt_length: PositiveInt = Field(default=16, validation_alias="HASH_SALT_LENGTH")
    hash_max_memory_cost_kib: PositiveInt = Field(
        default=77_824,
        validation_alias="HASH_MAX_MEMORY_COST_KIB",
    )
    hash_max_time_cost: PositiveInt = Field(default=8, validation_alias="HASH_MAX_TIME_COST")
    hash_max_parallelism: PositiveInt = Field(
        default=4,
        validation_alias="HASH_MAX_PARALLELISM",
    )
    decoy_password: NonEmptyStr = Field(
        default=DEFAULT_DECOY_PASSWORD,
        validation_alias="DECOY_PASSWORD",
    )
    hash_api_host: NonEmptyStr = Field(default="0.0.0.0", validation_alias="HASH_API_HOST")
    hash_api_port: PortInt = Field(default=8000, validation_alias="HASH_API_PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
