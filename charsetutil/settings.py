"""Runtime settings.

Defaults can be overridden through environment variables, optionally
kept in a ``.env`` file next to the calling application:

* ``CHARSETUTIL_DEFAULT_ENCODING`` – encoding assumed for ``\\uXXXX``
  escapes when the caller does not pass one (``UCS-2BE``).
* ``CHARSETUTIL_ON_DECODE_ERROR`` – what to do with an escape that
  cannot be converted: ``keep``, ``remove`` or ``strict`` (``keep``).

A ``.env`` file is only read; its values are never exported to
``os.environ``, and the process environment takes precedence over it.
Settings are read once and cached; call :func:`reload_settings` after
changing the environment.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from .encodings import DEFAULT_ENCODING, resolve_encoding
from .errors import UnsupportedEncodingError

logger = logging.getLogger(__name__)

ENV_DEFAULT_ENCODING = "CHARSETUTIL_DEFAULT_ENCODING"
ENV_ON_DECODE_ERROR = "CHARSETUTIL_ON_DECODE_ERROR"

DecodeErrorPolicy = Literal["keep", "remove", "strict"]


class SanitizerSettings(BaseModel):
    """Defaults applied when a call leaves an option unset."""

    model_config = ConfigDict(frozen=True)

    default_encoding: str = DEFAULT_ENCODING
    on_decode_error: DecodeErrorPolicy = "keep"

    @field_validator("default_encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            resolve_encoding(value)
        except UnsupportedEncodingError as e:
            raise ValueError(str(e))
        return value


@lru_cache(maxsize=1)
def get_settings() -> SanitizerSettings:
    """Build the settings from the environment (and ``.env``) once."""
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        source = {**dotenv_values(dotenv_path), **os.environ}
    else:
        logger.debug("No .env file found; using process environment only.")
        source = dict(os.environ)
    values = {}
    encoding = source.get(ENV_DEFAULT_ENCODING)
    if encoding:
        values["default_encoding"] = encoding
    policy = source.get(ENV_ON_DECODE_ERROR)
    if policy:
        values["on_decode_error"] = policy.strip().lower()
    settings = SanitizerSettings(**values)
    logger.debug("Loaded settings: %s", settings)
    return settings


def reload_settings() -> SanitizerSettings:
    """Drop the cached settings and read them again."""
    get_settings.cache_clear()
    return get_settings()


__all__ = [
    "SanitizerSettings",
    "DecodeErrorPolicy",
    "get_settings",
    "reload_settings",
    "ENV_DEFAULT_ENCODING",
    "ENV_ON_DECODE_ERROR",
]
