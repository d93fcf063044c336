"""Shared helpers for entry point handlers."""

import logging
import sys

from memban.config import Settings
from memban.errors import ConfigurationError


def load_settings_or_die(args) -> Settings:
    """Build Settings from args. Exit 2 with a message if they're invalid."""
    try:
        return Settings.from_args(args)
    except ConfigurationError as e:
        print(f"error: {e.message}", file=sys.stderr)
        sys.exit(2)


def configure_console_logging(settings: Settings) -> None:
    """Log to stderr, for modes that don't own the screen."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=settings.level,
    )


def configure_tui_logging(settings: Settings) -> None:
    """Route log records to the Textual devtools console."""
    from textual.logging import TextualHandler

    logging.basicConfig(level=settings.level, handlers=[TextualHandler()])
