"""Centralized logging setup and JSON formatter for structured logging."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Union

# Attributes every LogRecord carries; anything else on a record came from
# ``extra=`` and is copied into the JSON payload.
_STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message"}

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Keys: ``ts`` (ISO-8601, UTC with ``+00:00`` offset), ``level``,
    ``logger``, ``msg``, optionally ``exc`` and ``stack``, plus every
    ``extra=`` field.  An invalid-year warning logged with
    ``extra={"year": 2014, "reason": ...}`` therefore carries ``year``
    and ``reason`` keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        )

        # numpy ints and Paths fall back to str()
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = "INFO",
    json_format: bool = False,
) -> logging.Logger:
    """Attach a single stderr handler to the ``fars`` package logger.

    Calling this more than once replaces the previous handler rather than
    stacking a second one.

    Args:
        level: Logging level name or number.
        json_format: Use :class:`JsonFormatter` instead of plain text.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        if getattr(handler, "_fars_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_PLAIN_FORMAT)
    )
    handler._fars_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
