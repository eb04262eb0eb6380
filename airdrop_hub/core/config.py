from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment."""

    app_name: str = Field(default="Airdrop Hub", validation_alias="APP_NAME")
    environment: str = Field(default="local", validation_alias="APP_ENV")
    version: str = Field(default="0.1.0")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    database_url: str = Field(
        default="sqlite:///./airdrop_hub.db",
        validation_alias="DATABASE_URL",
    )

    # Privileged identity, fixed at configuration time
    admin_email: str = Field(default="admin@airdrop-hub.local", validation_alias="ADMIN_EMAIL")
    admin_username: str = Field(default="HubAdmin", validation_alias="ADMIN_USERNAME")
    admin_secret: str = Field(
        default="replace-with-admin-secret", validation_alias="ADMIN_SECRET"
    )

    # "plaintext" keeps stored secrets comparable by exact match.
    # Accepts "bcrypt,plaintext" or a JSON list.
    secret_schemes: Annotated[tuple[str, ...], NoDecode] = Field(
        default=("plaintext",), validation_alias="SECRET_SCHEMES"
    )

    membership_check_delay_seconds: float = Field(
        default=1.0, validation_alias="MEMBERSHIP_CHECK_DELAY_SECONDS"
    )
    captcha_min_operand: int = Field(default=1, validation_alias="CAPTCHA_MIN_OPERAND")
    captcha_max_operand: int = Field(default=10, validation_alias="CAPTCHA_MAX_OPERAND")

    unranked_sort_rank: int = Field(default=999, validation_alias="UNRANKED_SORT_RANK")
    enforce_unique_ranking_subject: bool = Field(
        default=True, validation_alias="ENFORCE_UNIQUE_RANKING_SUBJECT"
    )

    @field_validator("secret_schemes", mode="before")
    @classmethod
    def split_schemes(cls, v: Any) -> Any:
        """Accept a comma-separated string as well as a JSON list or a sequence."""
        if not isinstance(v, str):
            return v
        if v.lstrip().startswith("["):
            return json.loads(v)
        return tuple(part.strip() for part in v.split(",") if part.strip())

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="allow", populate_by_name=True
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
