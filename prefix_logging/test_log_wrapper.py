#!/usr/bin/env python3
"""
Test Logging Wrapper Module
"""

import dataclasses
import logging

import pytest

from prefix_logging.log_wrapper import BareLogger, LoggerKind, PrefixedLogger


@pytest.fixture
def handle(caplog):
    caplog.set_level(logging.DEBUG)
    return logging.getLogger("prefix_logging.test.wrapper")


class TestPrefixedLogger:
    """Test cases for PrefixedLogger."""
    
    def test_message_decoration(self, handle, caplog):
        """Test that the prefix and a single space lead the message."""
        logger = PrefixedLogger(handle, "[idx][3]")
        logger.info("started")
        
        assert caplog.records[-1].getMessage() == "[idx][3] started"
        assert caplog.records[-1].levelno == logging.INFO
    
    def test_absent_prefix_leaves_message_unchanged(self, handle, caplog):
        """Test that a logger without a prefix emits the message as-is."""
        logger = PrefixedLogger(handle, None)
        logger.info("started")
        
        assert caplog.records[-1].getMessage() == "started"
    
    def test_decorate(self, handle):
        """Test decorate for present and absent prefixes."""
        assert PrefixedLogger(handle, " [idx]").decorate("msg") == " [idx] msg"
        assert PrefixedLogger(handle).decorate("msg") == "msg"
    
    def test_args_are_interpolated_after_prefix(self, handle, caplog):
        """Test %-style args with a prefix that itself contains '%'."""
        logger = PrefixedLogger(handle, "[100%]")
        logger.warning("moved %d docs to %s", 5, "node-1")
        
        assert caplog.records[-1].getMessage() == "[100%] moved 5 docs to node-1"
    
    def test_level_methods(self, handle, caplog):
        """Test that each emit method uses its level."""
        logger = PrefixedLogger(handle, "[idx]")
        logger.debug("d")
        logger.info("i")
        logger.warning("w")
        logger.error("e")
        logger.critical("c")
        logger.log(logging.INFO, "l")
        
        assert [r.levelno for r in caplog.records] == [
            logging.DEBUG, logging.INFO, logging.WARNING,
            logging.ERROR, logging.CRITICAL, logging.INFO,
        ]
        assert [r.getMessage() for r in caplog.records] == [
            "[idx] d", "[idx] i", "[idx] w", "[idx] e", "[idx] c", "[idx] l",
        ]
    
    def test_exception_attaches_traceback(self, handle, caplog):
        """Test that exception() logs at error level with exc_info."""
        logger = PrefixedLogger(handle, "[idx]")
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logger.exception("failed")
        
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None
        assert record.getMessage() == "[idx] failed"
    
    def test_records_caller_location(self, handle, caplog):
        """Test that records point at the caller, not the wrapper."""
        PrefixedLogger(handle, "[idx]").info("here")
        
        assert caplog.records[-1].funcName == "test_records_caller_location"
    
    def test_disabled_level_not_emitted(self, handle, caplog):
        """Test that messages below the effective level are dropped."""
        caplog.set_level(logging.WARNING, logger=handle.name)
        logger = PrefixedLogger(handle, "[idx]")
        logger.info("quiet")
        
        assert not logger.is_enabled_for(logging.INFO)
        assert caplog.records == []
    
    def test_immutable(self, handle):
        """Test that prefix and handle cannot be reassigned."""
        logger = PrefixedLogger(handle, "[idx]")
        with pytest.raises(dataclasses.FrozenInstanceError):
            logger.prefix = "[other]"
        with pytest.raises(dataclasses.FrozenInstanceError):
            logger.handle = logging.getLogger("other")
    
    def test_kind_and_name(self, handle):
        """Test the variant tag and name passthrough."""
        logger = PrefixedLogger(handle, "[idx]")
        assert logger.kind is LoggerKind.PREFIXED
        assert logger.name == "prefix_logging.test.wrapper"


class TestBareLogger:
    """Test cases for BareLogger."""
    
    def test_passes_messages_through(self, handle, caplog):
        """Test that a bare logger never adds a prefix."""
        logger = BareLogger(handle)
        logger.error("plain %s", "text")
        
        assert logger.prefix is None
        assert logger.kind is LoggerKind.BARE
        assert caplog.records[-1].getMessage() == "plain text"
    
    def test_immutable(self, handle):
        """Test that a bare logger cannot be given a prefix."""
        logger = BareLogger(handle)
        with pytest.raises(dataclasses.FrozenInstanceError):
            logger.prefix = "[idx]"
