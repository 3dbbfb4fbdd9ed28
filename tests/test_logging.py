"""Tests for logging helpers."""

import io
import logging

import pytest

from imsg.protocol.constants import MAX_PAYLOAD_SIZE
from imsg.protocol.encoding import compose, decode_bytes, encode
from imsg.protocol.messages import Message
from imsg.utils.logging import PACKAGE_LOGGER, get_logger, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_get_logger_returns_named_logger():
    assert get_logger("imsg.test") is logging.getLogger("imsg.test")


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")


def test_setup_logging_configures_package_logger(package_logger):
    stream = io.StringIO()
    logger = setup_logging("debug", stream=stream)
    assert logger is package_logger
    assert logger.level == logging.DEBUG

    get_logger("imsg.protocol.encoding").debug("hello")
    assert " - imsg.protocol.encoding - DEBUG - hello" in stream.getvalue()


def test_setup_logging_replaces_previous_handler(package_logger):
    before = len(package_logger.handlers)
    setup_logging("INFO", stream=io.StringIO())
    setup_logging("ERROR", stream=io.StringIO())
    assert len(package_logger.handlers) == before + 1
    assert package_logger.level == logging.ERROR


def test_codec_logs_at_debug(caplog):
    """Encode and decode report headers at DEBUG level only."""
    with caplog.at_level(logging.DEBUG, logger="imsg.protocol.encoding"):
        decode_bytes(encode(compose(0xab, 1, b'x')))
    messages = [r.getMessage() for r in caplog.records]
    assert any("Encoding type=0xAB" in m for m in messages)
    assert any("Decoded type=0xAB" in m for m in messages)
    assert all(r.levelno == logging.DEBUG for r in caplog.records)


def test_setup_logging_does_not_duplicate_to_root(package_logger, caplog):
    """Records go to the package handler only, not to root handlers as well."""
    stream = io.StringIO()
    setup_logging("INFO", stream=stream)
    assert package_logger.propagate is False

    get_logger("imsg.protocol.encoding").info("once")
    assert stream.getvalue().count("once") == 1
    assert not any(r.getMessage() == "once" for r in caplog.records)


def test_compose_skips_repr_when_debug_disabled(monkeypatch):
    """A large payload is not formatted for log output nobody will see."""
    calls = []
    monkeypatch.setattr(Message, "__repr__", lambda self: calls.append(self) or "Message")
    logger = logging.getLogger("imsg.protocol.encoding")
    level = logger.level
    logger.setLevel(logging.WARNING)
    try:
        message = compose(1, 2, bytes(MAX_PAYLOAD_SIZE))
        decode_bytes(encode(message))
    finally:
        logger.setLevel(level)
    assert calls == []


def test_compose_debug_reports_size(caplog):
    with caplog.at_level(logging.DEBUG, logger="imsg.protocol.encoding"):
        compose(0xab, 7, bytes(300))
    assert "Composed type=0xAB peer_id=7 size: 300 bytes" in caplog.text
