"""Configuration for the Pretty JSON formatter."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional
from .types import Style
from .formatter import PrettyJson

STYLE_ENV_VAR = "PRETTY_JSON_STYLE"
LOG_LEVEL_ENV_VAR = "PRETTY_JSON_LOG_LEVEL"


@dataclass
class FormatterConfig:
    """Formatter settings, optionally taken from the environment."""

    style: Style = Style.DEFAULT
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FormatterConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            FormatterConfig with the configured values

        Raises:
            StyleError: If PRETTY_JSON_STYLE names an unknown style
        """
        environ = os.environ if environ is None else environ
        config = cls()

        style_name = environ.get(STYLE_ENV_VAR)
        if style_name:
            config.style = Style.from_name(style_name)

        level_name = environ.get(LOG_LEVEL_ENV_VAR)
        if level_name:
            config.log_level = level_name.strip().upper()
        return config

    @property
    def log_level_number(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING

    def create_formatter(self, logger: Optional[logging.Logger] = None) -> PrettyJson:
        """Create a PrettyJson formatter for the configured style."""
        return PrettyJson(self.style, logger=logger)
