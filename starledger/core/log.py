"""starledger.core.log

Logging setup for the ``starledger`` logger tree.

Modules log snake_case event names and put the facts in ``extra``; this module
decides how those records are rendered (plain text or one JSON object per line).
"""

from __future__ import annotations

import json
import logging
from typing import Any

from starledger.core.config import LoggingConfig

ROOT_LOGGER = "starledger"

# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _extras(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, sort_keys=True, default=str)


class PlainFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in sorted(extras.items()))
        return line


def configure_logging(cfg: LoggingConfig | None = None) -> logging.Logger:
    """Install a single stream handler on the ``starledger`` logger.

    Idempotent: calling it again replaces the handler instead of stacking another.
    """

    cfg = cfg or LoggingConfig()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, cfg.level, logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "_starledger", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if cfg.json_output else PlainFormatter())
    handler._starledger = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
