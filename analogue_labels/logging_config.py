"""
Logging setup for the analogue_labels package. The library modules only create
loggers, the command line calls configure_logging().
"""

import logging
import sys

_config_logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "analogue_labels"
DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level=logging.INFO, log_file=None, format_string=None):
    """
    Send the package's log records to stdout and, optionally, to log_file.

    Calling this again does not add duplicate handlers, it only changes the level.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if package_logger.handlers:
        _config_logger.debug("Logging already configured, level set to %s", logging.getLevelName(level))
        return

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)
        _config_logger.debug("File handler added for '%s'", log_file)
