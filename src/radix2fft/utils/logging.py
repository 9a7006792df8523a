"""
Logging utilities for benchmark runs.

Everything logs under the package logger "radix2fft": the engine modules
use child loggers (radix2fft.fft, ...), so the handlers installed here
also receive their DEBUG records when the configured level allows it.
"""

import logging
import sys
from pathlib import Path

from ..config import BenchmarkConfig

PACKAGE_LOGGER = 'radix2fft'
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def setup_logging(config: BenchmarkConfig) -> logging.Logger:
    """
    Configure the package logger for a benchmark run.

    Args:
        config: Run configuration. log_level sets the logger and file
            handler level; log_file (optional) adds a file handler.

    Returns:
        The "radix2fft" logger
    """
    level = getattr(logging, config.log_level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # A second run in the same process replaces the previous handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    # Console gets warnings only; results are printed with rich
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(max(level, logging.WARNING))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.log_file is not None:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_section(logger: logging.Logger, title: str, values: dict):
    """Log a titled block of key/value pairs."""
    logger.info("=" * 60)
    logger.info(title)
    logger.info("=" * 60)
    for key, value in values.items():
        if isinstance(value, float):
            logger.info(f"  {key}: {value:.6g}")
        else:
            logger.info(f"  {key}: {value}")
    logger.info("=" * 60)
