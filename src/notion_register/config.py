"""Application configuration via pydantic-settings."""

import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from notion_register.errors import MissingConfigError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


class Settings(BaseSettings):
    """Settings loaded from environment variables and an optional .env file.

    Variables already set in the process environment win over the file.
    """

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Notion
    notion_db_id: str = ""
    notion_token: str = ""


def load_settings(env_file: str | Path = DEFAULT_ENV_FILE) -> Settings:
    """Load settings and check that the required Notion values are present.

    A missing env file is logged and otherwise ignored. Raises
    MissingConfigError when NOTION_DB_ID or NOTION_TOKEN ends up empty.
    """
    if not Path(env_file).is_file():
        logger.warning("Error loading %s file: not found", env_file)

    settings = Settings(_env_file=env_file)

    missing = [
        name
        for name, value in (
            ("NOTION_DB_ID", settings.notion_db_id),
            ("NOTION_TOKEN", settings.notion_token),
        )
        if not value
    ]
    if missing:
        raise MissingConfigError(missing)
    return settings
