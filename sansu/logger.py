import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from sansu.config import get_settings

# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


def _extra_fields(record: logging.LogRecord) -> dict:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_KEYS
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per record, extras merged in at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        log_data.update(_extra_fields(record))
        if record.exc_info:
            log_data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Standard text format with ``key=value`` extras appended."""

    def format(self, record: logging.LogRecord) -> str:
        s = super().format(record)
        extra_args = _extra_fields(record)
        if extra_args:
            s += " " + " ".join(f"{k}={v}" for k, v in extra_args.items())
        return s


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    if json_format is None:
        json_format = settings.log_json

    logger = logging.getLogger("sansu")
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.propagate = False

    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = TextFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
