"""Configuration module for the stateful package."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from stateful.core.exceptions import ConfigurationError

load_dotenv()

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMATS = {"json", "plain"}


@dataclass(frozen=True)
class Config:
    """Runtime configuration with validation."""

    ENV: str
    LOG_LEVEL: str
    LOG_FILE: str
    LOG_FORMAT: str

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


def _build_config(env: str | None = None) -> Config:
    resolved_env = (env or os.getenv("ENV", "development")).strip().lower()

    config = Config(
        ENV=resolved_env,
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        LOG_FILE=os.getenv("LOG_FILE", "").strip(),
        LOG_FORMAT=os.getenv("LOG_FORMAT", "json").strip().lower(),
    )
    _validate_config(config)
    return config


def _validate_config(config: Config) -> None:
    if not config.ENV:
        raise ConfigurationError("ENV must not be empty.")
    if config.LOG_LEVEL not in LOG_LEVELS:
        raise ConfigurationError("LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.")
    if config.LOG_FORMAT not in LOG_FORMATS:
        raise ConfigurationError("LOG_FORMAT must be one of json/plain.")


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    """Get validated configuration for the requested environment."""
    return _build_config(env)
