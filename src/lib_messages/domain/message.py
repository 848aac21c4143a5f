"""Single message value object.

Purpose
-------
Hold one human-readable message together with the context mapping that
explains it. The message/context pair is the same shape loggers and
translators use, so a :class:`Message` can be handed to either.

Contents
--------
* :class:`Message` dataclass with fluent mutators and serialisation helpers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidArgumentError


@dataclass(slots=True)
class Message:
    """Mutable message carrying ``text`` and a ``context`` mapping.

    Attributes
    ----------
    text:
        Human-readable message; defaults to the empty string.
    context:
        Auxiliary key/value data. Insertion order is kept for serialisation.
    """

    text: str = ""
    context: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.context = _as_context(self.context)

    def __str__(self) -> str:
        return self.text

    def set_text(self, text: str) -> "Message":
        self.text = text
        return self

    def set_context(self, context: Mapping[str, Any]) -> "Message":
        self.context = _as_context(context)
        return self

    def merge_context(self, context: Mapping[str, Any]) -> "Message":
        """Overlay ``context`` onto the current context; incoming values win.

        Existing keys keep their position, new keys are appended in the
        order supplied.

        Examples
        --------
        >>> Message("hi", {"a": "b"}).merge_context({"c": "d"}).context
        {'a': 'b', 'c': 'd'}
        >>> Message("hi", {"a": "b"}).merge_context({"a": "x"}).context
        {'a': 'x'}
        """

        merged = dict(self.context)
        merged.update(_as_context(context))
        self.context = merged
        return self

    def add_context(self, key: str, value: Any) -> "Message":
        """Set a single context entry, overwriting an existing key."""

        return self.merge_context({key: value})

    def to_dict(self) -> dict[str, Any]:
        """Serialize the message to ``{"message": ..., "context": ...}``."""

        return {"message": self.text, "context": self.context}

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Message":
        """Build a message from a ``{message?, context?}`` mapping."""

        return cls(payload.get("message", ""), payload.get("context"))


def _as_context(context: Any) -> dict[str, Any]:
    """Copy ``context`` into a fresh dict; ``None`` reads as empty."""
    if context is None:
        return {}
    if not isinstance(context, Mapping):
        raise InvalidArgumentError("Message context must be a mapping")
    return dict(context)


__all__ = ["Message"]
