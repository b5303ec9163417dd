import logging
from pathlib import Path
from typing import Optional

# Centralized logger name
LOGGER_NAME = "deeplink_inspector"

def init_logging(
    verbose: bool = False,
    log_path: Optional[Path] = None,
    log_to_console: bool = True,
    log_to_file: bool = True
) -> logging.Logger:
    """
    Initializes and configures the main project logger.

    Args:
        verbose (bool): Enable DEBUG logging.
        log_path (Optional[Path]): Optional log file path.
        log_to_console (bool): Enable logging to stderr.
        log_to_file (bool): Enable logging to file.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Avoid duplicate logs when the entry point runs more than once (tests)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = _create_formatter()

    if log_to_file and log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if log_to_console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        # Console stays quiet unless asked; the report itself goes to stdout
        stream_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
        logger.addHandler(stream_handler)

    return logger


def _create_formatter() -> logging.Formatter:
    """
    Create a default log formatter.

    Returns:
        logging.Formatter
    """
    return logging.Formatter("[%(levelname)s] %(asctime)s - %(message)s")


def get_logger() -> logging.Logger:
    """
    Retrieve the main project logger.

    Returns:
        logging.Logger
    """
    return logging.getLogger(LOGGER_NAME)
