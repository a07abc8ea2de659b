"""Unit tests for structured logging: formatter, context and queue setup."""
from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator

import pytest

from conduit_service.core.settings.logs import LoggingSettings
from conduit_service.infra.logging import (
    ContextInjectingFilter,
    JSONFormatter,
    clear_log_context,
    configure_logging,
    get_log_context,
    set_log_context,
    setup_logging,
    shutdown,
)
from conduit_service.infra.logging import config as logging_config


def make_record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="conduit_service.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Stop the queue listener and restore the root level after a test."""
    root = logging.getLogger()
    level = root.level
    yield
    shutdown()
    root.setLevel(level)


@pytest.fixture(autouse=True)
def empty_log_context() -> Iterator[None]:
    clear_log_context()
    yield
    clear_log_context()


@pytest.mark.unit
class TestJSONFormatter:
    def test_basic_fields(self):
        payload = json.loads(JSONFormatter().format(make_record("Listed articles")))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "conduit_service.test"
        assert payload["message"] == "Listed articles"
        assert payload["timestamp"].endswith("Z")

    def test_extras_and_static_fields(self):
        formatter = JSONFormatter(static={"service": "conduit-service"})

        payload = json.loads(formatter.format(make_record(returned=5, has_next=True)))

        assert payload["service"] == "conduit-service"
        assert payload["returned"] == 5
        assert payload["has_next"] is True
        assert "msg" not in payload
        assert "args" not in payload

    def test_non_serializable_extra_is_stringified(self):
        payload = json.loads(JSONFormatter().format(make_record(direction=object())))

        assert payload["direction"].startswith("<object object")

    def test_exception_is_single_line(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        output = JSONFormatter().format(record)

        assert "\n" not in output
        assert "ValueError: boom" in json.loads(output)["exception"]

    def test_no_trace_ids_without_active_span(self):
        payload = json.loads(JSONFormatter().format(make_record()))

        assert "trace_id" not in payload
        assert "span_id" not in payload


@pytest.mark.unit
class TestLogContext:
    def test_set_and_get(self):
        set_log_context(request_id="abc")
        set_log_context(user="jake")

        assert get_log_context() == {"request_id": "abc", "user": "jake"}

    def test_get_returns_a_copy(self):
        set_log_context(request_id="abc")
        get_log_context()["request_id"] = "mutated"

        assert get_log_context()["request_id"] == "abc"

    def test_clear(self):
        set_log_context(request_id="abc")
        clear_log_context()

        assert get_log_context() == {}

    def test_filter_injects_without_overwriting(self):
        set_log_context(request_id="abc", returned=99)
        record = make_record(returned=5)

        assert ContextInjectingFilter().filter(record) is True
        assert record.request_id == "abc"
        assert record.returned == 5


@pytest.mark.unit
@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    def test_file_logging_through_queue(self, tmp_path):
        log_file = tmp_path / "logs" / "app.jsonl"
        configure_logging(
            log_level="INFO",
            console_enabled=False,
            file_path=log_file,
            capture_warnings=False,
            service_name="conduit-test",
        )

        set_log_context(request_id="req-1")
        logging.getLogger("conduit_service.features.articles.service").info(
            "Listed articles", extra={"returned": 3}
        )
        logging.getLogger("conduit_service.features.articles.service").debug("hidden")
        shutdown()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        payload = json.loads(lines[0])
        assert payload["message"] == "Listed articles"
        assert payload["service"] == "conduit-test"
        assert payload["request_id"] == "req-1"
        assert payload["returned"] == 3

    def test_text_format(self, tmp_path):
        log_file = tmp_path / "app.log"
        configure_logging(
            json_logs=False,
            console_enabled=False,
            file_path=log_file,
            capture_warnings=False,
            include_context=False,
        )

        logging.getLogger("conduit_service").warning("plain text")
        shutdown()

        line = log_file.read_text(encoding="utf-8").strip()
        assert line.endswith("WARNING - conduit_service - plain text")

    def test_setup_logging_runs_once(self, tmp_path, monkeypatch):
        monkeypatch.setattr(logging_config, "_LOGGING_INITIALIZED", False)
        calls = []
        monkeypatch.setattr(logging_config, "configure_logging", lambda **kw: calls.append(kw))
        settings = LoggingSettings(level="DEBUG", capture_warnings=False)

        setup_logging(settings)
        setup_logging(settings)
        setup_logging(settings, force=True, console_enabled=False)

        assert len(calls) == 2
        assert calls[0]["log_level"] == "DEBUG"
        assert calls[1]["console_enabled"] is False
