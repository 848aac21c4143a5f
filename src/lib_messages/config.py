"""Environment-driven settings for the CLI edge.

Purpose
-------
Read the ``LIB_MESSAGES_*`` environment variables, optionally seeded from the
nearest ``.env`` file, into a frozen :class:`Settings` snapshot. The domain
layer takes no configuration; only the CLI consults these values.

Contents
--------
* :class:`Settings` – frozen dataclass of resolved options.
* :func:`enable_dotenv` – load the closest ``.env`` without overriding the
  real environment.
* :func:`load_settings` – resolve :class:`Settings` from the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .domain.dump import DumpFormat

logger = logging.getLogger(__name__)

ENV_DUMP_FORMAT = "LIB_MESSAGES_DUMP_FORMAT"
ENV_NO_COLOR = "LIB_MESSAGES_NO_COLOR"
DOTENV_ENV_VAR = "LIB_MESSAGES_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved CLI options."""

    dump_format: DumpFormat = DumpFormat.TEXT
    no_color: bool = False


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop('LIB_MESSAGES_EXAMPLE_BOOL', None)
    >>> env_bool('LIB_MESSAGES_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LIB_MESSAGES_EXAMPLE_BOOL'] = '0'
    >>> env_bool('LIB_MESSAGES_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LIB_MESSAGES_EXAMPLE_BOOL')
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking upwards from ``search_from``.

    Without ``search_from`` the lookup starts at the working directory and
    is delegated to :func:`dotenv.find_dotenv`. Variables already present in
    the environment keep precedence. Returns the resolved path of the loaded
    file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED
    if search_from is None:
        raw = find_dotenv(usecwd=True)
        found = Path(raw).resolve() if raw else None
    else:
        found = _find_upwards(search_from)
    if found is None:
        logger.debug("No .env file found above %s", search_from or Path.cwd())
        return None
    load_dotenv(found, override=False)
    _DOTENV_LOADED = found
    logger.debug("Loaded environment from %s", found)
    return found


def _find_upwards(start: Path) -> Path | None:
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def dotenv_path() -> Path | None:
    """Return the ``.env`` path loaded by :func:`enable_dotenv`, if any."""

    return _DOTENV_LOADED


def load_settings(*, use_dotenv: bool | None = None) -> Settings:
    """Resolve :class:`Settings` from the environment.

    ``use_dotenv`` wins over ``LIB_MESSAGES_USE_DOTENV`` when not ``None``.

    Raises
    ------
    ValueError
        If ``LIB_MESSAGES_DUMP_FORMAT`` names an unsupported format.
    """

    if use_dotenv is None:
        use_dotenv = env_bool(DOTENV_ENV_VAR, default=False)
    if use_dotenv:
        enable_dotenv()
    raw_format = os.getenv(ENV_DUMP_FORMAT, DumpFormat.TEXT.value)
    return Settings(
        dump_format=DumpFormat.from_name(raw_format),
        no_color=env_bool(ENV_NO_COLOR, default=False),
    )


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "ENV_DUMP_FORMAT",
    "ENV_NO_COLOR",
    "DOTENV_ENV_VAR",
    "Settings",
    "dotenv_path",
    "enable_dotenv",
    "env_bool",
    "load_settings",
]
