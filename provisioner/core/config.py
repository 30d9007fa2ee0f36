from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SALT_ROUNDS = 10


class Settings(BaseSettings):
    """Provisioning configuration loaded from environment variables."""

    app_name: str = "Panel Admin Provisioner"
    app_version: str = "0.1.0"

    database_url: str = "sqlite+pysqlite:///./provisioner.db"
    users_key: str = "users"

    # bcrypt work factor; the bare SALT_ROUNDS name is kept for existing deployments
    salt_rounds: int = Field(
        default=DEFAULT_SALT_ROUNDS,
        validation_alias=AliasChoices("PROVISIONER_SALT_ROUNDS", "SALT_ROUNDS", "salt_rounds"),
    )

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PROVISIONER_",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("salt_rounds", mode="before")
    @classmethod
    def _default_when_blank(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_SALT_ROUNDS
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache
def get_settings() -> Settings:
    """Cache settings to avoid re-parsing environment files."""
    return Settings()
