"""Logging utilities for the World Cup viewer."""

import logging
import os

# Global state
_console_logging_enabled = True
_file_logger = None

DEFAULT_LOG_FILE = "/tmp/worldcup_debug.log"


def set_console_logging(enabled: bool):
    """Explicitly enable/disable console logging"""
    global _console_logging_enabled
    _console_logging_enabled = enabled


def _get_file_logger() -> logging.Logger:
    global _file_logger

    # Initialize file logger once
    if _file_logger is None:
        _file_logger = logging.getLogger("worldcup_file")
        _file_logger.setLevel(logging.DEBUG)
        log_file = os.getenv("WORLDCUP_LOG_FILE") or DEFAULT_LOG_FILE
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        _file_logger.addHandler(file_handler)
        _file_logger.propagate = False
    return _file_logger


def log(message: str, level: int = logging.INFO):
    """
    Log a message:
    - Always logs to file for debugging
    - Also logs to console unless console logging was switched off
    """
    _get_file_logger().log(level, message)

    if _console_logging_enabled:
        print(message, flush=True)
