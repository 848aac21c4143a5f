"""Output formats for rendering a message collection.

Purpose
-------
Give the CLI and configuration layer one canonical list of render formats.

Contents
--------
* :class:`DumpFormat` enumeration with parsing helpers.
"""

from __future__ import annotations

from enum import Enum


class DumpFormat(Enum):
    """Supported render targets for a collection.

    Examples
    --------
    >>> DumpFormat.TEXT.value
    'text'
    >>> DumpFormat.from_name('  JSON ') is DumpFormat.JSON
    True
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_name(cls, name: str) -> "DumpFormat":
        """Return the member matching ``name`` case-insensitively.

        Raises
        ------
        ValueError
            If the provided name is not recognised.
        """

        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported dump format: {name!r}")


__all__ = ["DumpFormat"]
