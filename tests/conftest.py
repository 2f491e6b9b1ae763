import io

import pytest

from columntypes import router
from columntypes.execution import config_executor
from columntypes.observability import logger as event_logger
from columntypes.pipeline import type_renderer


@pytest.fixture
def events(monkeypatch):
    """
    Capture structured log events as dicts instead of writing them out.
    """
    recorded = []

    def _record(event_type, payload, level=None):
        recorded.append({"event_type": event_type, "level": level, **payload})

    monkeypatch.setattr(type_renderer, "log_event", _record)
    monkeypatch.setattr(router, "log_event", _record)
    monkeypatch.setattr(config_executor, "log_event", _record)
    return recorded


@pytest.fixture
def log_stream():
    """
    Route the real event handler into a buffer for the duration of a test.
    """
    buffer = io.StringIO()
    previous = event_logger.set_log_stream(buffer)
    yield buffer
    event_logger.set_log_stream(previous)
