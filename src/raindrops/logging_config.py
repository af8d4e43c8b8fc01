"""
Logging Configuration
=====================
Sets up the 'raindrops' logger namespace and forwards Qt's own diagnostics
into it.

The animation may run for hours, so the optional log file is appended to and
rotated instead of being truncated on every start.
"""
import logging
import logging.handlers
import sys
from typing import Optional, Union

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

LOGGER_NAME = "raindrops"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'

# Rotation of the optional log file
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUP_COUNT = 3

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def resolve_level(level: Union[int, str]) -> int:
    """
    Turn a level name ('DEBUG', 'info', ...) or number into a logging level.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'raindrops' logger.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
        log_file: Optional path of a rotating log file (appended to).

    Returns:
        The configured package logger.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Re-running the setup must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            mode='a',
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding='utf-8',
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(numeric_level)}.")
    return logger


def _qt_message_handler(msg_type, context, message: str) -> None:
    logging.getLogger(f"{LOGGER_NAME}.qt").log(_QT_LEVELS.get(msg_type, logging.WARNING), message)


def install_qt_message_handler() -> None:
    """Send qDebug/qWarning output (e.g. painter or platform warnings) to the 'raindrops.qt' logger."""
    qInstallMessageHandler(_qt_message_handler)
