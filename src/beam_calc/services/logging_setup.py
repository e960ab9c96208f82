# path: src/beam_calc/services/logging_setup.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOGGER_NAME = "beam_calc"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(
    log_dir: Optional[str] = "logs",
    log_name: str = "beam_calc.log",
    level: int = logging.INFO,
) -> logging.Logger:
    """
    Logger raíz del paquete ("beam_calc"): consola + archivo rotativo.
    log_dir=None => solo consola.
    Los módulos usan logging.getLogger(__name__) y heredan estos handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Evitar duplicar handlers si se llama más de una vez
    if logger.handlers:
        return logger

    fmt = logging.Formatter(LOG_FORMAT)

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    if log_dir is None:
        logger.debug("Logging inicializado (solo consola).")
        return logger

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_name)

    fh = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    logger.info("Logging inicializado. Archivo: %s", log_path)
    return logger
