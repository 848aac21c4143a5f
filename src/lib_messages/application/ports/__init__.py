"""Protocols the presentation edge depends on."""

from __future__ import annotations

from .console import ConsolePort

__all__ = ["ConsolePort"]
