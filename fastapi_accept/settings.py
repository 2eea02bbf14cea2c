from functools import lru_cache
from typing import Literal, final

from pydantic_settings import BaseSettings, SettingsConfigDict


@final
class AcceptSettings(BaseSettings):
    model_config: SettingsConfigDict = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ACCEPT__",
        extra="ignore",
    )

    env: Literal["local", "dev", "prod"] = "local"

    # attribute name on request.state holding the parsed clauses
    state_key: str = "accept_clauses"


@lru_cache
def get_settings() -> AcceptSettings:
    return AcceptSettings()
