from __future__ import annotations

import json
import logging
import sys
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..ports import Loader

_RECORD_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self._timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        extras = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

    def _timestamp(self, created: float) -> str:
        if self.utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(created))
        return time.strftime("%Y-%m-%dT%H:%M:%S%z", time.localtime(created))


class PlainFormatter(logging.Formatter):
    """Plain text log formatter; appends `var` when the record carries one."""

    def __init__(self, *, utc: bool = True) -> None:
        dtfmt = "%Y-%m-%dT%H:%M:%SZ" if utc else "%Y-%m-%d %H:%M:%S%z"
        super().__init__(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt=dtfmt)
        self.converter = time.gmtime if utc else time.localtime

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        var = getattr(record, "var", None)
        if var is not None:
            line = f"{line} | var={var}"
        return line


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a namespaced logger."""
    return logging.getLogger(name or "envloader")


def configure_logging(
    loader: Loader | None = None,
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
) -> None:
    """
    Configures root logging.
    Explicit arguments win; otherwise LOG_LEVEL, LOG_FORMAT and LOG_UTC are
    read through `loader` when one is given.
    """
    if level is None:
        level = loader.get_str_or("LOG_LEVEL", "INFO") if loader is not None else "INFO"
    if fmt is None:
        fmt = loader.get_str_or("LOG_FORMAT", "plain") if loader is not None else "plain"
    if utc is None:
        utc = loader.get_bool_or("LOG_UTC", True) if loader is not None else True

    level_str = level.upper()
    fmt_str = fmt.lower()

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    root.setLevel(getattr(logging, level_str, logging.INFO))

    handler = logging.StreamHandler(stream=sys.stdout)
    if fmt_str == "json":
        handler.setFormatter(JsonFormatter(utc=utc))
    else:
        handler.setFormatter(PlainFormatter(utc=utc))

    root.addHandler(handler)

    log = get_logger("envloader.boot")
    log.info("logging configured", extra={"level": level_str, "format": fmt_str, "utc": utc})
