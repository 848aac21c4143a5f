"""Public package surface of lib_messages.

Messages are collected per verbosity in a :class:`MessageCollection`, which
can be used wherever a structured logger is expected and later flattened,
serialised, or converted to log records.
"""

from __future__ import annotations

from .adapters.logging_handler import MessageCollectionHandler
from .domain import (
    InvalidArgumentError,
    InvalidVerbosityError,
    LogRecord,
    Message,
    MessageCollection,
    MessageGroup,
    Verbosity,
)
from .lib_messages import summary_info

__all__ = [
    "InvalidArgumentError",
    "InvalidVerbosityError",
    "LogRecord",
    "Message",
    "MessageCollection",
    "MessageCollectionHandler",
    "MessageGroup",
    "Verbosity",
    "summary_info",
]
