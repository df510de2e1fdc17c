"""Application configuration.

Configuration is loaded from environment variables. For local use, you can provide a
`.env` file and set `PDFMETA_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "pdfmeta"
APP_VERSION = "0.1.0"

DestinationPolicy = Literal["skip", "promote", "abort"]


class Settings(BaseSettings):
    """pdfmeta settings.

    All fields are environment-configurable. Prefix is `PDFMETA_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="PDFMETA_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    # Text files
    text_encoding: str = Field(default="utf-8")

    # Outline write path: what happens to a node whose destination cannot be resolved.
    # skip: drop the node and its subtree; promote: drop the node, keep its children
    # at the node's depth; abort: fail the whole conversion.
    unsupported_destination_policy: DestinationPolicy = Field(default="skip")

    # Outline read path: fail the whole batch on an empty title instead of skipping the line.
    strict_titles: bool = Field(default=False)

    # Temporary files for atomic replacement; defaults to the target's directory.
    temp_dir: Path | None = Field(default=None)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("PDFMETA_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
