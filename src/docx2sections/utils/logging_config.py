"""Logging setup shared by the server entry points."""

from __future__ import annotations

import logging
import os
import sys

DEFAULT_LOG_LEVEL = "INFO"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s%(context)s"
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()) | {"message", "asctime"}

_configured = False


class ContextFormatter(logging.Formatter):
    """Append values passed through ``extra={...}`` to the log line."""

    def format(self, record: logging.LogRecord) -> str:
        context = {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}
        record.context = "".join(f" {key}={value!r}" for key, value in sorted(context.items()) if key != "context")
        return super().format(record)


def configure_logging(level: str | None = None) -> None:
    """Install a single stream handler on the root logger.

    Calling it again is a no-op. The level defaults to ``LOG_LEVEL`` from
    the environment.
    """
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ContextFormatter(_LOG_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel((level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring logging on first use."""
    configure_logging()
    return logging.getLogger(name)
