"""Adapters bridging the message collection to Rich and stdlib logging."""

from __future__ import annotations

from .console.rich_console import RichConsoleAdapter
from .logging_handler import MessageCollectionHandler

__all__ = ["MessageCollectionHandler", "RichConsoleAdapter"]
