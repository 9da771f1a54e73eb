"""Process logging setup."""

from __future__ import annotations

import logging

from roomlobby.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Route lobby loggers to stderr at the configured level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("roomlobby").setLevel(settings.lobby_log_level)
