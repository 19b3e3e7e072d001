"""
JSON log lines for the cache and the loaders that sit on top of it.
Records logged with `extra={"cache_key": ...}` carry the key as its own field.
"""

import json
import logging
from typing import Any, Dict, Union


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        cache_key = getattr(record, "cache_key", None)
        if cache_key is not None:
            payload["cache_key"] = cache_key
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def is_level_name(name: str) -> bool:
    return isinstance(logging.getLevelName(name), int)


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Install one JSON handler on the root logger; later calls only change the level."""
    root = logging.getLogger()
    root.setLevel(level)
    if any(isinstance(h.formatter, _JsonFormatter) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
