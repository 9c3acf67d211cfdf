"""
Logging Configuration
Sets up the package loggers for command line and notebook use.
"""
import logging
import sys
from typing import Optional

# Module loggers live under "stratum"; the orchestrator logs as "Slicer".
LOGGER_NAMES = ("stratum", "Slicer")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'stratum' namespace logger and the 'Slicer' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The 'stratum' logger.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Avoid duplicate lines when called twice
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.addHandler(console_handler)
        if file_handler is not None:
            logger.addHandler(file_handler)

    root = logging.getLogger(LOGGER_NAMES[0])
    root.info("Logging initialized.")
    return root
