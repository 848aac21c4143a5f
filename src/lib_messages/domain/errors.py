"""Exceptions raised by the message domain.

Purpose
-------
Give callers precise exception types for the two validation failures the
containers can report: an unknown verbosity name and a value of the wrong
shape.

Contents
--------
* :class:`InvalidVerbosityError` – unknown level name.
* :class:`InvalidArgumentError` – value is not a mapping/message/group.
"""

from __future__ import annotations

from typing import Any


class InvalidVerbosityError(ValueError):
    """Raised when a level name is not one of the ten known verbosities.

    Examples
    --------
    >>> str(InvalidVerbosityError("not-real"))
    "Invalid verbosity level 'not-real'"
    """

    def __init__(self, verbosity: Any = "") -> None:
        self.verbosity = verbosity
        super().__init__(f"Invalid verbosity level '{verbosity}'")


class InvalidArgumentError(TypeError):
    """Raised when a container receives a value of the wrong shape."""


__all__ = ["InvalidArgumentError", "InvalidVerbosityError"]
