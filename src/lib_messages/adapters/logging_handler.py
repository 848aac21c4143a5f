"""Bridge from the stdlib :mod:`logging` package into a message collection.

Purpose
-------
Let code that already logs through ``logging.getLogger(...)`` populate a
:class:`MessageCollection` without changing its call sites.

Contents
--------
* :class:`MessageCollectionHandler` – ``logging.Handler`` filing each record
  into the group matching its level.

System Role
-----------
The handler ignores records from the ``lib_messages`` logger hierarchy, so it
can sit on the root logger without filing the collection's own diagnostics
back into the collection.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from lib_messages.domain.collection import MessageCollection
from lib_messages.domain.verbosity import Verbosity

_LIBRARY_LOGGER = "lib_messages"


class MessageCollectionHandler(logging.Handler):
    """Collect stdlib log records into a :class:`MessageCollection`.

    The record's ``context`` attribute (set with ``extra={"context": {...}}``)
    becomes the message context, plus a ``logger`` key naming the emitter.
    Records emitted by ``lib_messages`` itself are dropped.

    Examples
    --------
    >>> collection = MessageCollection()
    >>> log = logging.getLogger("doctest.handler")
    >>> log.addHandler(MessageCollectionHandler(collection))
    >>> log.warning("disk %s%% full", 91)
    >>> str(collection.get_group("warning"))
    'disk 91% full'
    """

    def __init__(self, collection: MessageCollection | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.collection = collection if collection is not None else MessageCollection()
        self.addFilter(_skip_library_records)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            verbosity = Verbosity.from_python_level(record.levelno)
            self.collection.log(verbosity, record.getMessage(), self._context(record))
        except Exception:  # noqa: BLE001 - stdlib contract routes emit failures to handleError
            self.handleError(record)

    @staticmethod
    def _context(record: logging.LogRecord) -> dict[str, Any]:
        context: dict[str, Any] = {}
        supplied = getattr(record, "context", None)
        if isinstance(supplied, Mapping):
            context.update(supplied)
        context.setdefault("logger", record.name)
        return context


def _skip_library_records(record: logging.LogRecord) -> bool:
    return not (record.name == _LIBRARY_LOGGER or record.name.startswith(_LIBRARY_LOGGER + "."))


__all__ = ["MessageCollectionHandler"]
