"""
Configuration settings for attempt-probe.

Uses Pydantic Settings to load environment variables for the database
connection, logging and record generation defaults.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    db_host: str = Field("localhost", alias="DB_HOST")
    db_port: int = Field(5432, alias="DB_PORT")
    db_user: str = Field("postgres", alias="DB_USER")
    db_password: str = Field("postgres", alias="DB_PASSWORD")
    db_name: str = Field("attempt_probe", alias="DB_NAME")
    db_table: str = Field("payment_attempt", alias="DB_TABLE", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    db_connect_timeout: int = Field(10, alias="DB_CONNECT_TIMEOUT", ge=1)

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Generation defaults
    randr_seed: Optional[int] = Field(None, alias="RANDR_SEED")
    randr_string_length: int = Field(30, alias="RANDR_STRING_LENGTH", ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
