"""
Logging setup shared by the web front end and the command-line launcher.

Two formats are supported, selected by ``APP_LOG_FORMAT``:
    text  — ``%(asctime)s %(levelname)s %(name)s %(message)s``
    json  — one JSON object per line, with request fields merged in when
            they were passed through ``extra={...}``
"""

from __future__ import annotations

import json
import logging

_EXTRA_FIELDS = ("method", "path", "status", "duration_ms", "request_id",
                 "probe", "outcome")


class JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


def configure_logging(log_format: str = "text", level: int = logging.INFO) -> logging.Handler:
    """Install a single stream handler on the root logger and return it."""
    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
    logging.basicConfig(handlers=[handler], level=level, force=True)
    return handler
