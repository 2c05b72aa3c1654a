"""
Tests for the package logging setup.
"""
import io
import logging

import pytest

from pagebuilder.logging_config import LOGGER_NAME, resolve_level, setup_logging


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    for handler in handlers:
        logger.addHandler(handler)


class TestResolveLevel:

    @pytest.mark.parametrize("level, expected", [
        (logging.DEBUG, logging.DEBUG),
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
    ])
    def test_resolve_when_constant_or_name_then_level(self, level, expected):
        assert resolve_level(level) == expected

    def test_resolve_when_unknown_name_then_raises(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            resolve_level("nope")


class TestSetupLogging:

    def test_setup_then_package_logger_writes_to_stream(self):
        stream = io.StringIO()
        logger = setup_logging(level="info", stream=stream)
        assert logger.name == "pagebuilder"
        logging.getLogger("pagebuilder.model.io").info("saved")
        assert "pagebuilder.model.io - INFO - saved" in stream.getvalue()

    def test_setup_when_level_warning_then_info_dropped(self):
        stream = io.StringIO()
        setup_logging(level=logging.WARNING, stream=stream)
        logging.getLogger("pagebuilder.export").info("hidden")
        assert stream.getvalue() == ""

    def test_setup_when_called_twice_then_handlers_replaced(self):
        first, second = io.StringIO(), io.StringIO()
        setup_logging(stream=first)
        logger = setup_logging(stream=second)
        assert len(logger.handlers) == 1
        logger.warning("once")
        assert first.getvalue() == ""
        assert "once" in second.getvalue()

    def test_setup_when_log_file_then_records_in_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(level="debug", log_file=str(log_file), stream=io.StringIO())
        logger.debug("to file")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized at DEBUG." in text
        assert "to file" in text
