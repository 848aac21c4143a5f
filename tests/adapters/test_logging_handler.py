from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from lib_messages.adapters.logging_handler import MessageCollectionHandler
from lib_messages.domain.collection import MessageCollection


@pytest.fixture
def bridged() -> Iterator[tuple[logging.Logger, MessageCollection]]:
    collection = MessageCollection()
    handler = MessageCollectionHandler(collection)
    log = logging.getLogger("tests.bridge")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    log.addHandler(handler)
    try:
        yield log, collection
    finally:
        log.removeHandler(handler)
        log.propagate = True
        log.setLevel(logging.NOTSET)


@pytest.mark.parametrize(
    "level, group",
    [
        (logging.DEBUG, "debug"),
        (logging.INFO, "info"),
        (25, "info"),
        (logging.WARNING, "warning"),
        (logging.ERROR, "error"),
        (logging.CRITICAL, "critical"),
    ],
)
def test_handler_files_records_by_level(bridged: tuple[logging.Logger, MessageCollection], level: int, group: str) -> None:
    log, collection = bridged
    log.log(level, "payload")
    assert str(collection.get_group(group)) == "payload"
    assert collection.total() == 1


def test_handler_formats_arguments_and_adds_logger_name(bridged: tuple[logging.Logger, MessageCollection]) -> None:
    log, collection = bridged
    log.error("user %s failed", "ana", extra={"context": {"attempt": 3}})
    message = collection.get_group("error").get(0)
    assert message.text == "user ana failed"
    assert message.context == {"attempt": 3, "logger": "tests.bridge"}


def test_handler_ignores_non_mapping_context(bridged: tuple[logging.Logger, MessageCollection]) -> None:
    log, collection = bridged
    log.info("plain", extra={"context": "not a mapping"})
    assert collection.get_group("info").get(0).context == {"logger": "tests.bridge"}


def test_handler_respects_its_own_level() -> None:
    collection = MessageCollection()
    handler = MessageCollectionHandler(collection, level=logging.WARNING)
    log = logging.getLogger("tests.bridge.level")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    log.addHandler(handler)
    try:
        log.info("skipped")
        log.warning("kept")
    finally:
        log.removeHandler(handler)
    assert collection.total() == 1


def test_handler_creates_collection_when_missing() -> None:
    handler = MessageCollectionHandler()
    assert isinstance(handler.collection, MessageCollection)
    assert handler.collection.total() == 0


def test_root_handler_skips_library_diagnostics_on_round_trip() -> None:
    source = MessageCollection().error("boom", {"id": 1}).info("fine")
    handler = MessageCollectionHandler(level=logging.DEBUG)
    root = logging.getLogger()
    library = logging.getLogger("lib_messages")
    previous_root, previous_library = root.level, library.level
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    library.setLevel(logging.DEBUG)
    try:
        copy = MessageCollection().add_records(source.get_log_records())
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_root)
        library.setLevel(previous_library)
    assert copy.to_dict() == source.to_dict()
    assert handler.collection.total() == 0


@pytest.mark.parametrize("name", ["lib_messages", "lib_messages.domain.collection"])
def test_handler_drops_records_from_library_loggers(bridged: tuple[logging.Logger, MessageCollection], name: str) -> None:
    log, collection = bridged
    handler = log.handlers[0]
    handler.handle(logging.LogRecord(name, logging.DEBUG, __file__, 1, "internal", None, None))
    assert collection.total() == 0


def test_handler_keeps_records_from_similarly_named_loggers(bridged: tuple[logging.Logger, MessageCollection]) -> None:
    log, collection = bridged
    handler = log.handlers[0]
    handler.handle(logging.LogRecord("lib_messages_extra", logging.INFO, __file__, 1, "external", None, None))
    assert str(collection.get_group("info")) == "external"
