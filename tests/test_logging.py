"""Tests for the structured logging helpers."""
import logging

from scoresync.sync_app.logging import (
    MAX_DETAIL_LENGTH,
    DetailsFormatter,
    RingBufferHandler,
    create_logger,
    redact,
    ring_buffer,
)


def test_ring_buffer_keeps_latest_events():
    handler = RingBufferHandler(max_entries=2)
    log = logging.getLogger("scoresync.test.ring")
    log.addHandler(handler)
    log.setLevel(logging.INFO)
    log.propagate = False
    try:
        for i in range(3):
            log.info("event_%d", i, extra={"details": {"i": i}})
    finally:
        log.removeHandler(handler)
    events = handler.get_events()
    assert [e["event"] for e in events] == ["event_1", "event_2"]
    assert events[-1]["details"] == {"i": 2}
    handler.clear()
    assert handler.get_events() == []


def test_create_logger_is_idempotent(logger):
    again = create_logger(logger.name, ring_size=5)
    assert again is logger
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_events_without_details(logger, events):
    logger.warning("plain")
    [event] = events()
    assert event == {"event": "plain", "level": "WARNING", "ts": event["ts"], "details": {}}


def test_create_logger_with_console_stream():
    log = create_logger("scoresync.test.console", ring_size=5, level="DEBUG", stream=True)
    try:
        assert log.level == logging.DEBUG
        assert any(isinstance(h, logging.StreamHandler) and not isinstance(h, RingBufferHandler) for h in log.handlers)
        assert ring_buffer(log) is not None
    finally:
        for handler in list(log.handlers):
            log.removeHandler(handler)


def test_ring_buffer_lookup_without_handler():
    assert ring_buffer(logging.getLogger("scoresync.test.bare")) is None


def test_details_formatter_appends_details():
    formatter = DetailsFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "publish_failed", None, None)
    record.details = {"host": "h", "port": 1}
    assert formatter.format(record) == "ERROR publish_failed host='h' port=1"


def test_redact_truncates_long_values():
    long = "x" * (MAX_DETAIL_LENGTH + 10)
    cleaned = redact({"frame": long, "port": 1, "short": "ok"})
    assert cleaned["frame"].startswith("x" * MAX_DETAIL_LENGTH)
    assert cleaned["frame"].endswith("...(+10)")
    assert cleaned["port"] == 1
    assert cleaned["short"] == "ok"


def test_redact_empty():
    assert redact(None) == {}
    assert redact({}) == {}
