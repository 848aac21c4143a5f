"""Fixed registry of message groups, one per verbosity level.

Purpose
-------
Collect messages the way a structured logger would receive them, while
keeping them grouped by verbosity so responses can report, for example,
validation messages separately from successes.

Contents
--------
* :class:`MessageCollection` – logger-compatible container of ten
  :class:`~lib_messages.domain.group.MessageGroup` instances.

System Role
-----------
The single aggregate callers interact with. Name lookups are validated
through :meth:`Verbosity.from_name`; flattening and log-record conversion
always emit the highest severity first.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .errors import InvalidArgumentError, InvalidVerbosityError
from .group import MessageGroup
from .message import Message
from .records import LogRecord
from .verbosity import Verbosity

logger = logging.getLogger(__name__)

Level = Verbosity | str


class MessageCollection:
    """Ten message groups keyed by verbosity, usable as a structured logger.

    The set of keys is fixed: groups can be replaced or cleared but never
    added or removed, so ``len(collection)`` is always ten.

    Examples
    --------
    >>> collection = MessageCollection().debug("D1").emergency("E1")
    >>> [str(message) for message in collection.get_messages()]
    ['E1', 'D1']
    >>> collection.log("success", "saved").get_group("success").count()
    1
    """

    __slots__ = ("_groups",)

    def __init__(self) -> None:
        self._groups: dict[Verbosity, MessageGroup] = {verbosity: MessageGroup() for verbosity in Verbosity}

    def __repr__(self) -> str:
        counts = ", ".join(f"{name}={len(group)}" for name, group in self.items())
        return f"MessageCollection({counts})"

    def __str__(self) -> str:
        return ", ".join(str(group) for group in self._groups.values())

    # Logger-compatible API -------------------------------------------------

    def debug(self, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        return self._append(Verbosity.DEBUG, message, context)

    def info(self, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        return self._append(Verbosity.INFO, message, context)

    def success(self, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        return self._append(Verbosity.SUCCESS, message, context)

    def notice(self, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        return self._append(Verbosity.NOTICE, message, context)

    def validation(self, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        return self._append(Verbosity.VALIDATION, message, context)

    def warning(self, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        return self._append(Verbosity.WARNING, message, context)

    def error(self, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        return self._append(Verbosity.ERROR, message, context)

    def critical(self, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        return self._append(Verbosity.CRITICAL, message, context)

    def alert(self, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        return self._append(Verbosity.ALERT, message, context)

    def emergency(self, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        return self._append(Verbosity.EMERGENCY, message, context)

    def log(self, level: Level, message: str = "", context: Mapping[str, Any] | None = None) -> "MessageCollection":
        """Append ``message`` to the group named by ``level``.

        Raises
        ------
        InvalidVerbosityError
            If ``level`` is not one of the ten verbosity names.
        """

        return self._append(Verbosity.from_name(level), message, context)

    def _append(self, verbosity: Verbosity, message: str, context: Mapping[str, Any] | None) -> "MessageCollection":
        self._groups[verbosity].append(message, context)
        return self

    # Group access ----------------------------------------------------------

    def get_group(self, level: Level) -> MessageGroup:
        """Return the group for ``level`` or raise :class:`InvalidVerbosityError`."""

        return self._groups[Verbosity.from_name(level)]

    def groups(self) -> dict[str, MessageGroup]:
        """Return the ten groups keyed by name in ascending severity order."""

        return {verbosity.severity: group for verbosity, group in self._groups.items()}

    def get(self, level: Level) -> MessageGroup:
        return self.get_group(level)

    def has(self, level: Any) -> bool:
        """Return ``True`` when ``level`` names one of the ten groups."""

        try:
            Verbosity.from_name(level)
        except InvalidVerbosityError:
            return False
        return True

    def set(self, level: Level, group: MessageGroup) -> None:
        """Replace the whole group for ``level`` with ``group``.

        Raises
        ------
        InvalidVerbosityError
            If ``level`` is unknown.
        InvalidArgumentError
            If ``group`` is not a :class:`MessageGroup`.
        """

        verbosity = Verbosity.from_name(level)
        if not isinstance(group, MessageGroup):
            raise InvalidArgumentError("Only message groups can be added to a message collection")
        logger.debug("Replacing %s group (%d -> %d messages)", verbosity.severity, len(self._groups[verbosity]), len(group))
        self._groups[verbosity] = group

    def delete(self, level: Level) -> None:
        """Clear the messages of ``level``; the group itself stays registered."""

        self._groups[Verbosity.from_name(level)].clear()

    __getitem__ = get
    __setitem__ = set
    __delitem__ = delete
    __contains__ = has

    def count(self) -> int:
        """Return the number of groups, which is always ten."""

        return len(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def total(self) -> int:
        """Return the number of messages across every group."""

        return sum(len(group) for group in self._groups.values())

    def items(self) -> Iterator[tuple[str, MessageGroup]]:
        """Yield ``(name, group)`` pairs in ascending severity order."""

        for verbosity, group in self._groups.items():
            yield verbosity.severity, group

    def __iter__(self) -> Iterator[str]:
        return iter(Verbosity.names())

    # Flattening ------------------------------------------------------------

    def _descending(self) -> Iterator[tuple[Verbosity, Message]]:
        for verbosity in reversed(self._groups):
            for message in self._groups[verbosity]:
                yield verbosity, message

    def get_messages(self) -> list[Message]:
        """Return every message, highest severity group first.

        Messages keep their append order inside each group.
        """

        return [message for _, message in self._descending()]

    def get_log_records(self) -> list[LogRecord]:
        """Flatten the collection into :class:`LogRecord` objects.

        Ordering matches :meth:`get_messages`. ``success`` and ``validation``
        messages are reported under the standard ``info`` and ``notice``
        level names but keep their own verbosity weight.
        """

        return [LogRecord.from_message(verbosity, message) for verbosity, message in self._descending()]

    def add_records(self, records: Iterable[Any]) -> "MessageCollection":
        """Append messages from ``{level, message?, context?}`` records.

        Accepts mappings or :class:`LogRecord` objects. Records are appended
        one by one, so a failing element leaves earlier ones in place. Level
        names are read literally: a record produced for a ``success`` message
        carries ``info`` and is filed under ``info``.

        Raises
        ------
        InvalidArgumentError
            If an element is neither a mapping nor a :class:`LogRecord`, or
            its ``context`` is not a mapping.
        InvalidVerbosityError
            If ``level`` is missing or unknown.
        """

        added = 0
        for record in records:
            if not isinstance(record, LogRecord):
                if not isinstance(record, Mapping):
                    raise InvalidArgumentError("Entries within the messages list must all be mappings")
                record = LogRecord.from_mapping(record)
            self.log(record.level, record.message, record.context)
            added += 1
        logger.debug("Added %d records to collection", added)
        return self

    def has_messages(self, minimum: Level | None = None) -> bool:
        """Return ``True`` when any group at or above ``minimum`` holds a message."""

        threshold = Verbosity.from_name(minimum) if minimum is not None else Verbosity.DEBUG
        return any(len(group) for verbosity, group in self._groups.items() if verbosity.weight >= threshold.weight)

    def merge(self, other: "MessageCollection") -> "MessageCollection":
        """Append every message of ``other`` into the matching group of this collection."""

        if not isinstance(other, MessageCollection):
            raise InvalidArgumentError("Only message collections can be merged")
        for verbosity, group in other._groups.items():
            self._groups[verbosity].extend(group.messages)
        logger.debug("Merged %d messages into collection", other.total())
        return self

    # Serialisation ---------------------------------------------------------

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Serialize to ``{name: [message, ...]}`` in ascending severity order."""

        return {verbosity.severity: group.to_list() for verbosity, group in self._groups.items()}

    def to_json(self, **kwargs: Any) -> str:
        """Serialize :meth:`to_dict` output to JSON, preserving key order."""

        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "MessageCollection":
        """Rebuild a collection from :meth:`to_dict` output.

        Raises
        ------
        InvalidVerbosityError
            If a key is not a verbosity name.
        InvalidArgumentError
            If a group value is not a list of mappings.
        """

        collection = cls()
        for name, entries in payload.items():
            group = collection.get_group(name)
            if isinstance(entries, (str, bytes, Mapping)) or not isinstance(entries, Iterable):
                raise InvalidArgumentError(f"Group {name!r} must be a list of message mappings")
            group.extend_records(entries)
        logger.debug("Rebuilt collection with %d messages", collection.total())
        return collection


__all__ = ["MessageCollection"]
