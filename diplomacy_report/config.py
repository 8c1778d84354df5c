"""
Runtime settings read from the environment (and a .env file, if present).
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

ENV_INPUT = "DIPLOMACY_REPORT_INPUT"
ENV_LOG_LEVEL = "DIPLOMACY_REPORT_LOG_LEVEL"
ENV_LENIENT = "DIPLOMACY_REPORT_LENIENT"

DEFAULT_INPUT = "data.txt"
DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Settings for the reformatter command."""
    input_path: str = DEFAULT_INPUT
    log_level: str = DEFAULT_LOG_LEVEL
    lenient: bool = False

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return level

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from environment variables."""
        if environ is None:
            environ = os.environ
        return Settings(
            input_path=environ.get(ENV_INPUT, DEFAULT_INPUT),
            log_level=environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            lenient=environ.get(ENV_LENIENT, "").strip().lower() in _TRUE_VALUES
        )


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Load a .env file into the environment, then read settings from it."""
    load_dotenv(dotenv_path)
    return Settings.from_env()
