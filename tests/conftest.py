from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_messages.domain.collection import MessageCollection


@pytest.fixture
def record_console() -> Console:
    """Console capturing output for assertions."""

    return Console(file=StringIO(), record=True, width=120)


@pytest.fixture
def full_collection() -> MessageCollection:
    """Collection with one message per level plus a second debug and emergency entry."""

    collection = MessageCollection()
    collection.debug("Debug Message", {"n": 1})
    collection.debug("Debug Message 2", {"n": 1})
    collection.info("Info Message", {"n": 1})
    collection.success("Success Message", {"n": 1})
    collection.notice("Notice Message", {"n": 1})
    collection.validation("Validation Message", {"n": 1})
    collection.warning("Warning Message", {"n": 1})
    collection.error("Error Message", {"n": 1})
    collection.critical("Critical Message", {"n": 1})
    collection.alert("Alert Message", {"n": 1})
    collection.emergency("Emergency Message", {"n": 1})
    collection.emergency("Emergency Message 2", {"n": 1})
    return collection
