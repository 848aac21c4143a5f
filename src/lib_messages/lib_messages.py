"""Façade helpers used by the CLI and quick-start examples.

Contents
--------
* :func:`summary_info` – metadata banner as a string.
* :func:`build_demo_collection` – sample collection with one message per level.
* :func:`render` – render a collection as text (via a console port) or JSON.
"""

from __future__ import annotations

from .application.ports.console import ConsolePort
from .domain.collection import MessageCollection
from .domain.dump import DumpFormat
from .domain.verbosity import Verbosity


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


_DEMO_TEXT: dict[Verbosity, str] = {
    Verbosity.DEBUG: "Cache warmed",
    Verbosity.INFO: "Request received",
    Verbosity.SUCCESS: "Profile saved",
    Verbosity.NOTICE: "Password expires soon",
    Verbosity.VALIDATION: "Email address is invalid",
    Verbosity.WARNING: "Disk usage above threshold",
    Verbosity.ERROR: "Payment gateway rejected the request",
    Verbosity.CRITICAL: "Database connection lost",
    Verbosity.ALERT: "Replica lag exceeds limit",
    Verbosity.EMERGENCY: "Service unavailable",
}


def build_demo_collection() -> MessageCollection:
    """Return a collection holding one sample message for every verbosity."""

    collection = MessageCollection()
    for verbosity, text in _DEMO_TEXT.items():
        collection.log(verbosity, text, {"demo": True, "weight": verbosity.weight})
    return collection


def render(collection: MessageCollection, *, dump_format: DumpFormat, console: ConsolePort, colorize: bool) -> str | None:
    """Render ``collection`` as JSON text or through ``console``.

    Returns the JSON payload for :attr:`DumpFormat.JSON`; text output is
    written by the console port and ``None`` is returned.
    """

    if dump_format is DumpFormat.JSON:
        return collection.to_json(indent=2)
    console.emit(collection, colorize=colorize)
    return None


__all__ = ["build_demo_collection", "render", "summary_info"]
