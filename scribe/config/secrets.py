"""Secrets and provider endpoint configuration."""

from __future__ import annotations

ENV_OPENAI_API_KEY = "OPENAI_API_KEY"
ENV_OPENAI_BASE_URL = "OPENAI_BASE_URL"
ENV_OPENAI_TIMEOUT_S = "OPENAI_TIMEOUT_S"
ENV_OPENAI_MAX_RETRIES = "OPENAI_MAX_RETRIES"

DEFAULT_OPENAI_TIMEOUT_S = 60.0
DEFAULT_OPENAI_MAX_RETRIES = 2

__all__ = [
    "DEFAULT_OPENAI_MAX_RETRIES",
    "DEFAULT_OPENAI_TIMEOUT_S",
    "ENV_OPENAI_API_KEY",
    "ENV_OPENAI_BASE_URL",
    "ENV_OPENAI_MAX_RETRIES",
    "ENV_OPENAI_TIMEOUT_S",
]
