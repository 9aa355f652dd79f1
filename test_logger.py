"""Application logger setup."""

import logging

from logger import LOGGER_NAME, get_logger, setup_logging


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "picker.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    try:
        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == 2
        assert setup_logging(logging.DEBUG, str(log_file)) is logger
        assert len(logger.handlers) == 2

        get_logger("date_picker").warning("rejected %s", "1403/01/15")
        for handler in logger.handlers:
            handler.flush()
        assert "rejected 1403/01/15" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


def test_child_loggers():
    parent = logging.getLogger(LOGGER_NAME)
    child = get_logger("settings")
    assert child.name == f"{LOGGER_NAME}.settings"
    assert child.parent is parent
