"""
Logging System for Postfix Expression Evaluation

The package logger carries only a NullHandler until configure_logging() is
called, so importing or using the engine never touches handlers the
application attached itself.
"""

import logging
import sys
from typing import List, Optional
from enum import Enum
from datetime import datetime

LOGGER_NAME = 'postfix_eval'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class LogLevel(Enum):
    """Enumeration of logging levels for the evaluation engine"""
    SILENT = 0      # Nothing
    MINIMAL = 1     # Warnings only
    DETAILED = 2    # Validation failures and async scheduling
    VERBOSE = 3     # Per-evaluation errors and scratch pool misses


class ExpressionLogger:
    """
    Level-gated front end over the package's stdlib logger
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL):
        self.log_level = log_level
        self.logger = logging.getLogger(LOGGER_NAME)

    def should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self.should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def info(self, message: str):
        """Validation and scheduling details"""
        if self.should_log(LogLevel.DETAILED):
            self.logger.info(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self.should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance and the handlers configure_logging() installed
_global_logger: Optional[ExpressionLogger] = None
_installed_handlers: List[logging.Handler] = []


def get_logger() -> ExpressionLogger:
    """Get or create the global logger instance without installing handlers"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    get_logger().log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ExpressionLogger:
    """Configure the global logging system.

    Replaces only the handlers a previous call installed; handlers attached
    by the application are left alone.
    """
    global _global_logger
    _global_logger = ExpressionLogger(log_level=log_level)
    logger = _global_logger.logger
    logger.setLevel(logging.DEBUG)

    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if log_level != LogLevel.SILENT:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        _installed_handlers.append(console_handler)

    if log_to_file:
        if log_file_path is None:
            log_file_path = f"postfix_eval_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        logger.addHandler(handler)
    return _global_logger


def is_debug_enabled() -> bool:
    """Cheap guard for call sites that would otherwise format a message"""
    return get_logger().should_log(LogLevel.VERBOSE)


def log_info(message: str):
    get_logger().info(message)


def log_warning(message: str):
    get_logger().warning(message)


def log_debug(message: str):
    get_logger().debug(message)
