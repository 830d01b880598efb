"""Diary application configuration."""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

_ENV_PREFIX = "DIARY_"


class DiaryConfig(BaseModel):
    """
    Runtime configuration.

    Values come from DIARY_* environment variables (see load_config); the
    database URL itself is resolved separately because it is a secret.
    """

    storage_backend: Literal["postgres", "file"] = Field(
        default="postgres",
        description="Which note store backs the API",
    )
    data_file: Path = Field(
        default=Path("diary_notes.json"),
        description="JSON document used by the file backend",
    )
    display_timezone: str = Field(
        default="UTC",
        description="IANA timezone for entry dates shown to users",
    )

    # Server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    static_dir: Path | None = Field(
        default=None,
        description="Directory with the page shell, mounted at /static when set",
    )

    # Remote repository
    api_base_url: str = Field(
        default="http://127.0.0.1:3000",
        description="Base URL the remote repository talks to",
    )
    request_timeout_seconds: float = Field(default=10.0, gt=0, le=120)


def load_config(env_file: str | Path | None = None) -> DiaryConfig:
    """
    Build a DiaryConfig from the environment.

    A .env file is loaded first when present; real environment variables
    win over it.
    """
    load_dotenv(env_file, override=False)

    fields = DiaryConfig.model_fields
    values = {}
    for name in fields:
        raw = os.getenv(f"{_ENV_PREFIX}{name.upper()}")
        if raw is not None and raw != "":
            values[name] = raw

    return DiaryConfig.model_validate(values)


def resolve_database_url() -> str:
    """
    Database URL for the postgres backend.

    DATABASE_URL wins; otherwise the URL is read from Vault.

    Raises:
        VaultError: If Vault is not configured or the secret is missing
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    from clients.vault_client import get_database_url
    return get_database_url()
