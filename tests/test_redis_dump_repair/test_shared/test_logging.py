"""Tests for correlation-aware logging."""

import logging

from redis_dump_repair.shared.logging import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Tests for CorrelationLogger."""

    def test_component_defaults_to_module(self):
        """Test the default component name."""
        logger = get_logger("redis_dump_repair.repair.rewriter")
        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "rewriter"

    def test_records_carry_correlation_info(self, caplog):
        """Test that extra fields are attached to records."""
        logger = get_logger("redis_dump_repair.test", "run-7", "unit")
        with caplog.at_level(logging.INFO, logger="redis_dump_repair.test"):
            logger.info("hello", extra={"lines": 3})

        record = caplog.records[-1]
        assert record.getMessage() == "hello"
        assert record.correlation_id == "run-7"
        assert record.component == "unit"
        assert record.lines == 3
