import json
import logging

from fars.utils.logging import JsonFormatter, configure_logging


def _record(**extra):
    record = logging.LogRecord(
        name="fars.data.reader",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="invalid year: %s",
        args=(2014,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_payload():
    payload = json.loads(JsonFormatter().format(_record(year=2014, reason="missing")))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "fars.data.reader"
    assert payload["msg"] == "invalid year: 2014"
    assert payload["year"] == 2014
    assert payload["reason"] == "missing"
    assert "lineno" not in payload


def test_json_formatter_non_serializable_extra(tmp_path):
    payload = json.loads(JsonFormatter().format(_record(path=tmp_path)))
    assert payload["path"] == str(tmp_path)


def test_configure_logging_is_idempotent():
    configure_logging("info")
    logger = configure_logging("debug", json_format=True)

    handlers = [h for h in logger.handlers if getattr(h, "_fars_handler", False)]
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JsonFormatter)
    assert logger.level == logging.DEBUG


def test_json_formatter_timestamp_is_utc():
    record = _record()
    record.created = 0.0

    payload = json.loads(JsonFormatter().format(record))

    assert payload["ts"] == "1970-01-01T00:00:00+00:00"


def test_json_formatter_stack_info():
    record = _record()
    record.stack_info = "Stack (most recent call last):\n  here"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["stack"].endswith("here")
    assert "stack_info" not in payload
