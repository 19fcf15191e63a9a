"""
Centralized Logging Module for the i18n translation tools.

Provides consistent logging across all modules with output to:
- Console (stderr, so tool output on stdout stays clean)
- File (~/.angular-i18n-tools/logs/i18n_tools.log for post-mortem analysis)
"""
import logging
import os
import sys

# Per-user default; I18N_TOOLS_LOG_DIR moves it (tests, CI)
LOG_DIR_NAME = os.path.join(".angular-i18n-tools", "logs")
LOG_FILE_NAME = "i18n_tools.log"

# Formatter with timestamp, level, module, and message
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(funcName)s() | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def default_log_dir() -> str:
    return os.path.join(os.path.expanduser("~"), LOG_DIR_NAME)


def get_log_file() -> str:
    log_dir = os.environ.get("I18N_TOOLS_LOG_DIR") or default_log_dir()
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, LOG_FILE_NAME)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a configured logger instance.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        A logging.Logger instance configured for file and console output.
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    # File Handler - captures everything (DEBUG and above)
    file_handler = logging.FileHandler(get_log_file(), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    # Console Handler - only INFO and above for cleaner output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def setup_exception_hook():
    """
    Installs a global exception hook to log uncaught exceptions before exit.
    Call this once at process startup.
    """
    crash_logger = get_logger("CRASH")

    def exception_hook(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            # Allow Ctrl+C to exit without logging
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return
        crash_logger.critical("Uncaught exception!", exc_info=(exc_type, exc_value, exc_tb))
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = exception_hook
