"""Logging helpers."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
LOGGER_NAME = "seealso_client"


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging once for CLI usage.

    ``quiet`` wins over ``verbose`` so scripted runs can silence the
    per-lookup chatter without editing other flags.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger() -> logging.Logger:
    """Return the package logger used across the CLI and pipeline."""
    return logging.getLogger(LOGGER_NAME)
