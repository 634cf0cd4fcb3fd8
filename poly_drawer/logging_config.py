"""
Logging configuration for the poly_drawer CLI.

Console lines stay short because stdout also carries the matrix and
equation printout; the optional log file keeps timestamps and is
appended to so consecutive fits end up in one history.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER: str = "poly_drawer"

CONSOLE_FORMAT: str = "[%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'poly_drawer' logger and return it.

    Args:
        verbose: DEBUG instead of INFO (the CLI's ``--verbose``), which adds
            best-triangle areas and fit residuals to the output.
        log_file: Optional path; records are appended, never truncated.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Re-running main() in one process must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.debug("Logging at %s%s", logging.getLevelName(level),
                 f", appending to {log_file}" if log_file else "")
    return logger
