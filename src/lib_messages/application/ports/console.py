"""Console port describing how a collection is shown on a terminal.

Purpose
-------
Define the abstraction for adapters that render a message collection to an
interactive console, so the CLI depends on a narrow protocol rather than on
Rich directly.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with a single ``emit``
  method supporting optional colour control.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_messages.domain.collection import MessageCollection


@runtime_checkable
class ConsolePort(Protocol):
    """Render a message collection to an interactive console."""

    def emit(self, collection: MessageCollection, *, colorize: bool) -> None:
        """Render ``collection`` with optional colour control."""


__all__ = ["ConsolePort"]
