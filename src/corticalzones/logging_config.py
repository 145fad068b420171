"""
Logging Configuration
Sets up the 'corticalzones' logger from the values in config.py
(CORTICALZONES_LOG_LEVEL / CORTICALZONES_LOG_FILE).
"""
import logging
import sys
from typing import Optional

from corticalzones import config

LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'corticalzones' namespace.

    Args:
        level: Logging level; defaults to config.LOG_LEVEL.
        log_file: Path to also write logs to; defaults to config.LOG_FILE.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = config.LOG_LEVEL
    if log_file is None:
        log_file = config.LOG_FILE

    logger = logging.getLogger("corticalzones")
    logger.setLevel(level)

    # Calling setup again (tests, window restarts) replaces the handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(
        f"Logging initialized (level={logging.getLevelName(level)}, file={log_file or '-'})."
    )
    if config.REJECTED_LOG_LEVEL:
        logger.warning(
            f"Unknown CORTICALZONES_LOG_LEVEL '{config.REJECTED_LOG_LEVEL}', "
            f"using {logging.getLevelName(config.LOG_LEVEL)}."
        )

    return logger
