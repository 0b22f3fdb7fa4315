"""Tests for logging helpers."""

import logging

import pytest

from hormone_scoring.utils import get_logger, setup_logging
from hormone_scoring.utils.logging import PACKAGE_LOGGER


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


class TestGetLogger:

    def test_module_name_kept(self):
        logger = get_logger("hormone_scoring.core.composite")
        assert logger.name == "hormone_scoring.core.composite"
        assert logger is logging.getLogger("hormone_scoring.core.composite")

    def test_outside_name_nested_under_package(self):
        assert get_logger("__main__").name == "hormone_scoring.__main__"


class TestSetupLogging:

    def test_level_from_config(self, package_logger):
        logger = setup_logging({"level": "warning"})
        assert logger is package_logger
        assert logger.level == logging.WARNING

    def test_verbose_forces_debug(self, package_logger):
        assert setup_logging({"level": "ERROR"}, verbose=True).level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, package_logger):
        assert setup_logging({"level": "chatty"}).level == logging.INFO

    def test_repeat_call_replaces_handlers(self, package_logger):
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_root_logger_untouched(self, package_logger):
        root_handlers = list(logging.getLogger().handlers)
        setup_logging()
        assert logging.getLogger().handlers == root_handlers

    def test_file_handler(self, package_logger, tmp_path):
        log_file = tmp_path / "logs" / "scoring.log"
        setup_logging({"file": str(log_file), "format": "%(levelname)s %(message)s"})
        get_logger("hormone_scoring.io.config_reader").info("loaded weights")
        for handler in package_logger.handlers:
            handler.flush()
        assert log_file.read_text(encoding="utf-8").strip() == "INFO loaded weights"
