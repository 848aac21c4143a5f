"""Domain entities and value objects of the message collection."""

from __future__ import annotations

from .collection import MessageCollection
from .dump import DumpFormat
from .errors import InvalidArgumentError, InvalidVerbosityError
from .group import MessageGroup
from .message import Message
from .records import LogRecord
from .verbosity import Verbosity

__all__ = [
    "DumpFormat",
    "InvalidArgumentError",
    "InvalidVerbosityError",
    "LogRecord",
    "Message",
    "MessageCollection",
    "MessageGroup",
    "Verbosity",
]
