"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Print a collection's messages, highest severity first, with one Rich style
per verbosity.

Contents
--------
* :data:`_STYLE_MAP` - default verbosity-to-style mapping.
* :class:`RichConsoleAdapter` - adapter used by the ``demo`` CLI command.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from rich.console import Console

from lib_messages.application.ports.console import ConsolePort
from lib_messages.domain.collection import MessageCollection
from lib_messages.domain.records import LogRecord
from lib_messages.domain.verbosity import Verbosity


_STYLE_MAP: Mapping[Verbosity, str] = {
    Verbosity.DEBUG: "dim",
    Verbosity.INFO: "cyan",
    Verbosity.SUCCESS: "green",
    Verbosity.NOTICE: "blue",
    Verbosity.VALIDATION: "magenta",
    Verbosity.WARNING: "yellow",
    Verbosity.ERROR: "red",
    Verbosity.CRITICAL: "bold red",
    Verbosity.ALERT: "bold white on red",
    Verbosity.EMERGENCY: "blink bold white on red",
}

#: Default Rich styles keyed by :class:`Verbosity`.

_BY_WEIGHT: Mapping[int, Verbosity] = {verbosity.weight: verbosity for verbosity in Verbosity}


class RichConsoleAdapter(ConsolePort):
    """Render message collections using Rich with style overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[Verbosity | str, str] | None = None,
    ) -> None:
        """Configure the console adapter with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            merged[Verbosity.from_name(key)] = value
        self._style_map = merged

    def emit(self, collection: MessageCollection, *, colorize: bool) -> None:
        """Print every message of ``collection``, highest severity first.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.emit(MessageCollection().warning('disk low'), colorize=False)
        >>> 'disk low' in console.export_text()
        True
        """
        for record in collection.get_log_records():
            verbosity = _BY_WEIGHT[record.verbosity]
            style = self._style_map.get(verbosity, "") if colorize and not self._no_color else ""
            self._console.print(self._format_line(verbosity, record), style=style, highlight=False, markup=False)

    @staticmethod
    def _format_line(verbosity: Verbosity, record: LogRecord) -> str:
        """Return a console line for ``record`` collected under ``verbosity``."""
        context = record.context
        context_str = "" if not context else " " + " ".join(f"{key}={value}" for key, value in context.items())
        return f"{verbosity.severity.upper():>10} {record.message}{context_str}"


__all__ = ["RichConsoleAdapter"]
