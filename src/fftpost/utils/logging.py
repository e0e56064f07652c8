"""
Logging setup for fftpost.

Library modules only create loggers under the 'fftpost' namespace; handlers
are attached by applications (see scripts/extract_spectrum.py) through
setup_logging().
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = 'fftpost'
DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    format_string: str = None,
    name: str = PACKAGE_LOGGER,
    console_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Attach console and file handlers to a logger.

    Args:
        log_file: Path to log file (if None, only console output)
        level: Level of the logger and of the file handler
        format_string: Custom format string
        name: Logger name (defaults to the package logger)
        console_level: Level of the stderr handler

    Returns:
        Configured logger
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Replace handlers from an earlier call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger inside the package namespace.

    Module names already under 'fftpost' are used as-is; anything else is
    nested below it ('cli' -> 'fftpost.cli').
    """
    if not name:
        return logging.getLogger(PACKAGE_LOGGER)
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{PACKAGE_LOGGER}.{name}')
