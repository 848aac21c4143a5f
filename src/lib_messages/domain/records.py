"""Flat log-record representation of collected messages.

Purpose
-------
Describe the ``{level, verbosity, message, context}`` shape exchanged with
logger-style consumers, and the typed conversion into and out of it.

Contents
--------
* :class:`LogRecord` frozen dataclass with ``to_dict``/``from_mapping``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .message import Message
from .verbosity import Verbosity


@dataclass(slots=True, frozen=True)
class LogRecord:
    """One collected message flattened for logger consumption.

    Attributes
    ----------
    level:
        Standard logger level name (``success`` reads as ``info`` and
        ``validation`` as ``notice``).
    verbosity:
        Weight of the group the message was collected in.
    message:
        Message text.
    context:
        Shallow copy of the message context.
    """

    level: str
    verbosity: int
    message: str = ""
    context: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_message(cls, verbosity: Verbosity, message: Message) -> "LogRecord":
        return cls(
            level=verbosity.logger_level,
            verbosity=verbosity.weight,
            message=message.text,
            context=dict(message.context),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the record as an ordered ``level/verbosity/message/context`` dict."""

        return {
            "level": self.level,
            "verbosity": self.verbosity,
            "message": self.message,
            "context": dict(self.context),
        }

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "LogRecord":
        """Rebuild a record from :meth:`to_dict` output.

        ``verbosity`` falls back to the weight of ``level`` when absent.

        Raises
        ------
        InvalidVerbosityError
            If ``level`` is missing or unknown.
        InvalidArgumentError
            If ``context`` is present but not a mapping.
        """

        level = Verbosity.from_name(payload.get("level", ""))
        message = Message.from_mapping(payload)
        return cls(
            level=level.severity,
            verbosity=payload.get("verbosity", level.weight),
            message=message.text,
            context=message.context,
        )


__all__ = ["LogRecord"]
