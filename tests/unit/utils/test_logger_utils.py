import logging

import pytest

from utils.logger_utils import configure_logging, get_logger


def test_configure_logging_replaces_handlers_and_quiets_neo4j(tmp_path):
    log_file = tmp_path / "app.log"
    configure_logging(str(log_file), "debug")
    configure_logging(str(log_file), "DEBUG")

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 2
    assert logging.getLogger("neo4j").level == logging.WARNING

    get_logger("Test Logger").info("hello")
    for handler in root_logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()

    configure_logging()


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(log_level="LOUD")
