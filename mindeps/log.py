"""Logging setup driven by ``LoggingConfig``.

Modules log through ``logging.getLogger(__name__)``; only the CLI calls
``configure_logging`` so library users keep control of their handlers.
"""
from __future__ import annotations

import json
import logging

from mindeps.config.schemas.observability import LoggingConfig

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "ts": record.created,
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


def configure_logging(cfg: LoggingConfig | None = None) -> logging.Logger:
    cfg = cfg or LoggingConfig()
    logger = logging.getLogger("mindeps")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = logging.StreamHandler()
    if cfg.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        )
    logger.addHandler(handler)
    logger.setLevel(_LEVELS[cfg.level])
    logger.propagate = False
    return logger


__all__ = ["configure_logging", "JsonFormatter"]
