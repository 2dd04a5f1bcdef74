"""Logging setup for the Streamlit app."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Attach one stream handler to the ``attendly`` logger.

    Streamlit reruns the script on every interaction, so this must be safe to
    call repeatedly without stacking handlers.
    """
    logger = logging.getLogger("attendly")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
