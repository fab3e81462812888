from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List, Tuple

import pytest

from wrapedit.runtime import telemetry


class FakeLogger:
    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Any]] = []

    def info_with(self, message: str, pairs: Any) -> None:
        self.records.append(("info", message, pairs))

    def warning_with(self, message: str, pairs: Any) -> None:
        self.records.append(("warning", message, pairs))

    def debug(self, message: str) -> None:
        self.records.append(("debug", message, None))


def test_span_handle_stringifies_metadata() -> None:
    handle = telemetry.SpanHandle(logger=FakeLogger(), span_name="buffer::save")

    handle.add_metadata("lines", 3)
    handle.add_metadata("names", ["a", "b"])

    assert handle.metadata == {"lines": "3", "names": "['a', 'b']"}


def test_span_handle_warn_includes_span_and_reason() -> None:
    log = FakeLogger()
    handle = telemetry.SpanHandle(
        logger=log, span_name="commands::run", component_name="commands"
    )

    handle.warn("bad")

    level, message, pairs = log.records[0]
    assert (level, message) == ("warning", "span::warn")
    assert ("span", "commands::run") in pairs
    assert ("component", "commands") in pairs
    assert ("reason", "bad") in pairs


def test_record_event_uses_structured_method(monkeypatch: pytest.MonkeyPatch) -> None:
    log = FakeLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: log)

    telemetry.record_event("editor.start", data={"buffers": 1})

    assert log.records == [
        ("info", "event::editor.start", [("event", "editor.start"), ("buffers", "1")])
    ]


def test_record_event_falls_back_to_plain_method(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    log = FakeLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: log)

    telemetry.record_event("mode.switch", level="debug")

    message = "event::mode.switch {'event': 'mode.switch'}"
    assert log.records == [("debug", message, None)]


def test_unknown_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: FakeLogger())

    with pytest.raises(ValueError):
        telemetry.record_event("mode.switch", level="trace")


class ContextLogger(FakeLogger):
    def __init__(self) -> None:
        super().__init__()
        self.context: dict = {}
        self.profiled: List[str] = []
        self.components: List[str] = []

    def error_with(self, message: str, pairs: Any) -> None:
        self.records.append(("error", message, pairs))

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        del self.context[key]

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.profiled.append(name)
        yield

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield


def test_span_binds_metadata_for_the_block(monkeypatch: pytest.MonkeyPatch) -> None:
    log = ContextLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: log)

    with telemetry.span("buffer::load", component="buffer", metadata={"lines": 2}):
        assert log.context == {"lines": "2"}

    assert log.context == {}
    assert log.profiled == ["buffer::load"]
    assert log.components == ["buffer"]


def test_span_logs_and_reraises_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    log = ContextLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: log)

    with pytest.raises(KeyError):
        with telemetry.span("actions::execute", metadata={"action": "dd"}):
            raise KeyError("dd")

    level, message, pairs = log.records[-1]
    assert (level, message) == ("error", "span::fail")
    assert ("action", "dd") in pairs
    assert log.context == {}
