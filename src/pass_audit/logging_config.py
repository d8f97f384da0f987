"""
Logging setup for the pass-audit CLI.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, under the ``pass_audit`` namespace, when the CLI asks for
``-v`` or ``--log-file``. Log records never carry password text.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "pass_audit"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    *,
    console: bool = True,
) -> logging.Logger:
    """
    Route ``pass_audit.*`` records to stderr and/or a file.

    Args:
        level: Threshold for the package logger and its handlers.
        log_file: When set, records are also written there (truncated first).
        console: Attach the stderr handler. stdout is left alone so
            ``--format json`` output stays parseable.

    Returns the configured package logger. Calling this again replaces the
    handlers from the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    if console:
        _attach(logger, logging.StreamHandler(sys.stderr), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode="w", encoding="utf-8"), level)

    logger.debug("Logging initialized (console=%s, file=%s)", console, log_file or "-")
    return logger
