"""Tests for JSON logging."""

import json
import logging
import sys
from io import StringIO

import pytest

from expiring_cache.core.cache import ExpiringCache
from expiring_cache.core.errors import MissingEntry
from expiring_cache.core.logging import _JsonFormatter, get_logger, is_level_name, setup_logging


def test_setup_logging_creates_handler(restore_root_logger):
    """Test that setup_logging adds a handler only once."""
    root = restore_root_logger
    setup_logging()
    count = len(root.handlers)
    setup_logging()
    assert len(root.handlers) == count
    assert any(isinstance(h.formatter, _JsonFormatter) for h in root.handlers)


def test_setup_logging_accepts_level_name(restore_root_logger):
    """Test that a level name is accepted."""
    setup_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "test"


def test_json_formatter_produces_json():
    """Test that logs are formatted as JSON."""
    logger = get_logger("test.json")
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(_JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

    try:
        logger.info("Test message")
    finally:
        logger.removeHandler(handler)

    parsed = json.loads(stream.getvalue().strip())
    assert parsed["level"] == "INFO"
    assert parsed["logger"] == "test.json"
    assert parsed["msg"] == "Test message"


def test_json_formatter_includes_exception():
    """Test that exception info is serialized."""
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
    try:
        raise RuntimeError("bad")
    except RuntimeError:
        record.exc_info = sys.exc_info()
    parsed = json.loads(_JsonFormatter().format(record))
    assert "RuntimeError: bad" in parsed["exc_info"]


def test_missing_entry_logged(caplog):
    """Test that misuse of get is logged as a warning."""
    cache = ExpiringCache(5)
    with caplog.at_level(logging.WARNING, logger="expiring_cache.core.cache"):
        with pytest.raises(MissingEntry):
            cache.get("absent")
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.cache_key == "absent"


def test_json_formatter_includes_cache_key():
    """Test that the cache key is emitted as its own field."""
    record = logging.LogRecord("x", logging.DEBUG, __file__, 1, "Refreshing cache entry", None, None)
    record.cache_key = "globalconf"
    parsed = json.loads(_JsonFormatter().format(record))
    assert parsed["cache_key"] == "globalconf"
    assert parsed["msg"] == "Refreshing cache entry"
    assert "time" in parsed


def test_json_formatter_omits_missing_cache_key():
    """Test that records without a cache key have no cache_key field."""
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "plain", None, None)
    assert "cache_key" not in json.loads(_JsonFormatter().format(record))


def test_is_level_name():
    """Test level name recognition."""
    assert is_level_name("DEBUG") is True
    assert is_level_name("VERBOSE") is False
