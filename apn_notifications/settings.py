"""Runtime configuration read from ``APN_*`` environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="APN_", env_file=".env", env_file_encoding="utf-8",
        extra="ignore")

    auto_truncate: bool = Field(
        default=False,
        description="Send oversized messages instead of raising "
                    "ExceededMessageSizeError",
    )
    max_payload_size: int = Field(
        default=2048, gt=0,
        description="Largest JSON payload, in bytes",
    )
    max_message_size: int = Field(
        default=2048, gt=0,
        description="Largest binary message, in bytes",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
