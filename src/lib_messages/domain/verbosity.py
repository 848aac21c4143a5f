"""Verbosity levels naming the groups of a message collection.

Purpose
-------
Offer a closed, validated vocabulary of ten severities. The eight standard
logger levels are extended with ``success`` and ``validation`` for
response-oriented messages.

Contents
--------
* :class:`Verbosity` enum with name lookup and logger/stdlib conversions.
* ``_LOGGER_LEVELS`` mapping the two non-standard levels onto standard names.
* ``_PYTHON_LEVELS`` mapping each verbosity onto a :mod:`logging` number.

System Role
-----------
Every lookup by name in :mod:`lib_messages.domain.collection` funnels through
:meth:`Verbosity.from_name`, so an unknown name always surfaces as
:class:`~lib_messages.domain.errors.InvalidVerbosityError`.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from .errors import InvalidVerbosityError


class Verbosity(Enum):
    """Enumerated verbosity levels ordered by ascending severity."""

    DEBUG = 100
    INFO = 200
    SUCCESS = 250
    NOTICE = 300
    VALIDATION = 350
    WARNING = 400
    ERROR = 500
    CRITICAL = 600
    ALERT = 700
    EMERGENCY = 800

    @property
    def severity(self) -> str:
        """Return the lowercase level name used as collection key."""

        return self.name.lower()

    @property
    def weight(self) -> int:
        """Return the numeric verbosity weight."""

        return self.value

    @property
    def logger_level(self) -> str:
        """Return the closest standard logger level name.

        Examples
        --------
        >>> Verbosity.SUCCESS.logger_level
        'info'
        >>> Verbosity.ALERT.logger_level
        'alert'
        """

        return _LOGGER_LEVELS.get(self, self.severity)

    def to_python_level(self) -> int:
        """Return the :mod:`logging` number used when bridging to stdlib loggers."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: Any) -> "Verbosity":
        """Resolve an exact lowercase level name.

        Raises
        ------
        InvalidVerbosityError
            If ``name`` is not one of the ten known level names.

        Examples
        --------
        >>> Verbosity.from_name("validation") is Verbosity.VALIDATION
        True
        >>> Verbosity.from_name("DEBUG")
        Traceback (most recent call last):
        ...
        lib_messages.domain.errors.InvalidVerbosityError: Invalid verbosity level 'DEBUG'
        """

        if isinstance(name, cls):
            return name
        try:
            return _BY_NAME[name]
        except (KeyError, TypeError) as exc:
            raise InvalidVerbosityError(name) from exc

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return the ten level names in ascending severity order."""

        return tuple(member.severity for member in cls)

    @classmethod
    def from_python_level(cls, level: int) -> "Verbosity":
        """Translate a stdlib logging number into the matching standard verbosity."""

        if level < logging.INFO:
            return cls.DEBUG
        if level < logging.WARNING:
            return cls.INFO
        if level < logging.ERROR:
            return cls.WARNING
        if level < logging.CRITICAL:
            return cls.ERROR
        return cls.CRITICAL


_BY_NAME: dict[str, Verbosity] = {member.severity: member for member in Verbosity}

_LOGGER_LEVELS: dict[Verbosity, str] = {
    Verbosity.SUCCESS: "info",
    Verbosity.VALIDATION: "notice",
}
# Standard logger names for the two response-oriented levels.

_PYTHON_LEVELS: dict[Verbosity, int] = {
    Verbosity.DEBUG: logging.DEBUG,
    Verbosity.INFO: logging.INFO,
    Verbosity.SUCCESS: logging.INFO,
    Verbosity.NOTICE: logging.INFO + 5,
    Verbosity.VALIDATION: logging.INFO + 5,
    Verbosity.WARNING: logging.WARNING,
    Verbosity.ERROR: logging.ERROR,
    Verbosity.CRITICAL: logging.CRITICAL,
    Verbosity.ALERT: logging.CRITICAL + 5,
    Verbosity.EMERGENCY: logging.CRITICAL + 10,
}


__all__ = ["Verbosity"]
