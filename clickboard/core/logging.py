"""Logging setup."""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once for the running process."""

    logging.basicConfig(format=LOG_FORMAT, level=(level or LOG_LEVEL).upper())


__all__ = ["LOG_FORMAT", "configure_logging"]
