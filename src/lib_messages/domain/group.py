"""Ordered group of messages sharing one verbosity.

Purpose
-------
Store messages in append order with index-based access. Removing an index
leaves a gap rather than shifting later messages, so an index handed out once
keeps pointing at the same message.

Contents
--------
* :class:`MessageGroup` – index-addressable container with bulk helpers and
  serialisation.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .errors import InvalidArgumentError
from .message import Message


class MessageGroup:
    """Ordered, index-addressable sequence of :class:`Message` objects.

    Examples
    --------
    >>> group = MessageGroup().append("first").append("second", {"id": 2})
    >>> len(group), str(group)
    (2, 'first, second')
    >>> group.remove(0)
    >>> [index for index, _ in group.items()]
    [1]
    """

    __slots__ = ("_messages", "_next_index")

    def __init__(self, messages: Iterable[Message] | None = None) -> None:
        self._messages: dict[int, Message] = {}
        self._next_index = 0
        if messages is not None:
            self.extend(messages)

    def __repr__(self) -> str:
        return f"MessageGroup({self.messages!r})"

    def __str__(self) -> str:
        return ", ".join(str(message) for message in self._messages.values())

    def append(self, text: str = "", context: Mapping[str, Any] | None = None) -> "MessageGroup":
        """Create a :class:`Message` from ``text``/``context`` and append it."""

        return self.append_message(Message(text, context))

    def extend_records(self, records: Iterable[Any]) -> "MessageGroup":
        """Append one message per ``{message?, context?}`` mapping.

        Elements are processed in order; a non-mapping element raises and
        leaves the previously appended messages in place.

        Raises
        ------
        InvalidArgumentError
            If any element, or its ``context``, is not a mapping.
        """

        for record in records:
            if not isinstance(record, Mapping):
                raise InvalidArgumentError("Entries within the messages list must all be mappings")
            self.append_message(Message.from_mapping(record))
        return self

    def append_message(self, message: Message) -> "MessageGroup":
        """Append a pre-built :class:`Message`."""

        if not isinstance(message, Message):
            raise InvalidArgumentError("Only messages can be added to a message group")
        self._messages[self._next_index] = message
        self._next_index += 1
        return self

    def extend(self, messages: Iterable[Message]) -> "MessageGroup":
        for message in messages:
            self.append_message(message)
        return self

    def clear(self) -> "MessageGroup":
        """Remove every message and restart indexing at zero."""

        self._messages = {}
        self._next_index = 0
        return self

    def count(self) -> int:
        return len(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def messages(self) -> list[Message]:
        """Return the messages in storage order."""

        return list(self._messages.values())

    def set_messages(self, messages: Iterable[Message]) -> "MessageGroup":
        """Replace the whole content with ``messages``, re-indexed from zero."""

        return self.clear().extend(messages)

    def get(self, index: int) -> Message:
        """Return the message at ``index``.

        Raises
        ------
        IndexError
            If no message is stored at ``index``.
        """

        try:
            return self._messages[index]
        except KeyError as exc:
            raise IndexError(f"No message at index {index!r}") from exc

    def set(self, index: int, message: Message) -> None:
        """Store ``message`` at ``index``, replacing any message already there."""

        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentError(f"Message indexes must be integers, got {index!r}")
        if not isinstance(message, Message):
            raise InvalidArgumentError("Only messages can be added to a message group")
        self._messages[index] = message
        if index >= self._next_index:
            self._next_index = index + 1

    def has(self, index: int) -> bool:
        return index in self._messages

    def remove(self, index: int) -> None:
        """Remove the message at ``index``; absent indexes are ignored."""

        self._messages.pop(index, None)

    __getitem__ = get
    __setitem__ = set
    __delitem__ = remove
    __contains__ = has

    def items(self) -> Iterator[tuple[int, Message]]:
        """Yield ``(index, message)`` pairs in storage order."""

        for index, message in self._messages.items():
            yield index, message

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def to_list(self) -> list[dict[str, Any]]:
        """Serialize every message in storage order."""

        return [message.to_dict() for message in self._messages.values()]


__all__ = ["MessageGroup"]
