"""
Runtime settings for the Cerebro shell.

Settings come from ``CEREBRO_*`` environment variables, after an optional
``.env`` file in the working directory has been loaded.
"""

import logging
import os
from collections.abc import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "CEREBRO_"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """
    Cerebro settings.

    Params:
        skip_prompts: Approve destructive actions without asking
        log_level: Name of the root logging level
        history_size: Number of command lines kept for navigation
    """

    skip_prompts: bool = False
    log_level: str = "WARNING"
    history_size: int = Field(default=50, ge=1)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return level


def settings_from_env(environ: Mapping[str, str]) -> Settings:
    """
    Build settings from a mapping of environment variables.

    Unset or blank variables keep their defaults.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    values = {}
    for name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper(), "").strip()
        if raw:
            values[name] = raw
    return Settings(**values)


def load_settings(dotenv: bool = True) -> Settings:
    """Load ``.env`` (without overriding the real environment) and read settings."""
    if dotenv:
        load_dotenv(override=False)
    settings = settings_from_env(os.environ)
    logger.debug("Loaded settings %r", settings)
    return settings
