import logging
import os
import tempfile

from beam_calc.services.logging_setup import LOGGER_NAME, setup_logging


def _reset():
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def test_setup_logging_writes_file_and_is_idempotent():
    _reset()
    try:
        with tempfile.TemporaryDirectory() as td:
            logger = setup_logging(td, "test.log")
            n = len(logger.handlers)
            assert setup_logging(td, "test.log") is logger
            assert len(logger.handlers) == n

            logging.getLogger("beam_calc.engine.analysis").info("mensaje de prueba")
            for h in logger.handlers:
                h.flush()

            path = os.path.join(td, "test.log")
            with open(path, encoding="utf-8") as fh:
                text = fh.read()
            assert "mensaje de prueba" in text
            assert "| INFO | beam_calc.engine.analysis |" in text
            _reset()
    finally:
        _reset()


def test_setup_logging_console_only():
    _reset()
    try:
        logger = setup_logging(None, level=logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
    finally:
        _reset()
