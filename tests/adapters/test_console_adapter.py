from __future__ import annotations

import pytest
from rich.console import Console

from lib_messages.adapters.console.rich_console import RichConsoleAdapter
from lib_messages.domain.collection import MessageCollection
from lib_messages.domain.errors import InvalidVerbosityError


def _collection() -> MessageCollection:
    return MessageCollection().debug("trace on").success("saved", {"id": 7}).emergency("down")


def test_rich_console_adapter_renders_highest_severity_first(record_console: Console) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.emit(_collection(), colorize=True)
    lines = record_console.export_text().splitlines()
    assert [line.split()[0] for line in lines] == ["EMERGENCY", "SUCCESS", "DEBUG"]
    assert "saved id=7" in lines[1]


def test_rich_console_adapter_respects_no_color(record_console: Console) -> None:
    adapter = RichConsoleAdapter(console=record_console, no_color=True)
    adapter.emit(_collection(), colorize=True)
    output = record_console.export_text(styles=True)
    assert "\x1b[" not in output
    assert "down" in output


@pytest.mark.parametrize("colorize", [True, False])
def test_rich_console_adapter_allows_color_flag(record_console: Console, colorize: bool) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.emit(_collection(), colorize=colorize)
    output = record_console.export_text()
    assert "trace on" in output
    assert "id=7" in output


def test_rich_console_adapter_prints_nothing_for_empty_collection(record_console: Console) -> None:
    RichConsoleAdapter(console=record_console).emit(MessageCollection(), colorize=True)
    assert record_console.export_text() == ""


def test_rich_console_adapter_validates_style_keys() -> None:
    with pytest.raises(InvalidVerbosityError):
        RichConsoleAdapter(styles={"loud": "red"})


def test_rich_console_adapter_accepts_style_overrides(record_console: Console) -> None:
    adapter = RichConsoleAdapter(console=record_console, styles={"success": "bold green"})
    adapter.emit(_collection(), colorize=True)
    assert "saved" in record_console.export_text()
