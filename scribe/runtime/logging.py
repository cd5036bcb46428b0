"""Logging initialization."""

from __future__ import annotations

import logging

from scribe.config.logging import LOG_LEVEL, LOG_FORMAT, SHOW_HTTP_LOGS


def configure_logging() -> None:
    # The OpenAI SDK logs every HTTP request through httpx. Keep it tame unless explicitly enabled.
    if not SHOW_HTTP_LOGS:
        logging.getLogger("openai").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
