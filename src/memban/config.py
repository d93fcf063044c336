"""Runtime settings for the memban front ends."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from memban.errors import ConfigurationError

LOG_LEVEL_ENV = "MEMBAN_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_log_level(value: str) -> int:
    """Convert a level name like "info" to its logging constant."""
    name = value.strip().upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level '{value}' (expected one of {', '.join(LOG_LEVELS)})",
            field="log_level",
            value=value,
        )
    return getattr(logging, name)


@dataclass
class Settings:
    """Settings shared by the console and the TUI."""

    log_level: str = "WARNING"
    sample_data: bool = False
    board_name: str = "memban"

    @property
    def level(self) -> int:
        return parse_log_level(self.log_level)

    @classmethod
    def from_args(cls, args, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from parsed CLI args.

        The log level comes from --log-level, then $MEMBAN_LOG_LEVEL, then
        the default.
        """
        environ = os.environ if environ is None else environ
        log_level = getattr(args, "log_level", None) or environ.get(LOG_LEVEL_ENV) or cls.log_level
        parse_log_level(log_level)
        return cls(
            log_level=log_level.strip().upper(),
            sample_data=bool(getattr(args, "sample", False)),
            board_name=getattr(args, "board", None) or cls.board_name,
        )
