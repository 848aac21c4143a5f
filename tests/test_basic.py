"""Behavioral tests for the package surface and metadata helpers."""

from __future__ import annotations

import lib_messages
from lib_messages import summary_info


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for lib_messages" in summary
    assert "version" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_public_surface_exports_core_types() -> None:
    collection = lib_messages.MessageCollection().critical("db down")
    assert isinstance(collection.get_group("critical"), lib_messages.MessageGroup)
    assert collection.get_log_records()[0] == lib_messages.LogRecord(level="critical", verbosity=600, message="db down")


def test_collection_exposes_standard_logger_methods() -> None:
    collection = lib_messages.MessageCollection()
    for name in ("debug", "info", "notice", "warning", "error", "critical", "alert", "emergency", "log"):
        assert callable(getattr(collection, name))
