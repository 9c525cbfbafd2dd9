"""Process-wide logging configuration."""

from __future__ import annotations

import logging

from config import LOG_FORMAT, LOG_LEVEL

_CONFIGURED = False


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Configure root logging once per process and return the app logger.

    Streamlit re-executes the script on every interaction, so repeated calls
    are no-ops.
    """
    global _CONFIGURED
    if not _CONFIGURED:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
        _CONFIGURED = True
    return logging.getLogger("studybot")
