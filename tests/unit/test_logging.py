"""Unit tests for logging setup."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from dummy_file_creator.logging import (
    LOGGER_NAME,
    JSONFormatter,
    get_logger,
    setup_logging,
)


def make_record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="dummy_file_creator.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Hello %s",
        args=("world",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_formats_basic_fields(self) -> None:
        output = json.loads(JSONFormatter().format(make_record()))

        assert output["level"] == "INFO"
        assert output["logger"] == "dummy_file_creator.test"
        assert output["message"] == "Hello world"
        assert "timestamp" in output
        assert "extra" not in output

    def test_includes_extra_fields(self) -> None:
        output = json.loads(JSONFormatter().format(make_record(path="out.bin", total_bytes=10)))

        assert output["extra"] == {"path": "out.bin", "total_bytes": 10}

    def test_includes_exception(self) -> None:
        try:
            raise OSError("disk full")
        except OSError:
            record = make_record()
            record.exc_info = sys.exc_info()

        output = json.loads(JSONFormatter().format(record))

        assert "disk full" in output["exception"]


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_single_stderr_handler(self) -> None:
        logger = setup_logging("debug", name="dummy_file_creator.test_setup")
        setup_logging("INFO", name="dummy_file_creator.test_setup")

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_text_format(self) -> None:
        logger = setup_logging("WARNING", name="dummy_file_creator.test_text", log_format="text")

        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            setup_logging("LOUD")


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger."""

    def test_package_logger(self) -> None:
        assert get_logger().name == LOGGER_NAME

    def test_child_logger(self) -> None:
        assert get_logger("engine").name == f"{LOGGER_NAME}.engine"

    def test_module_name_used_as_is(self) -> None:
        name = "dummy_file_creator.services.dummy_file"

        assert get_logger(name).name == name
