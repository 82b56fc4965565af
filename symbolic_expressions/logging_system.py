"""
Logging System for the Expression Engine

Centralized, leveled logging so that parsing and differentiation can report
what they do without cluttering the terminal of callers who do not care.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of engine verbosity levels"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Warnings only
    DETAILED = 2    # Per-call summaries
    VERBOSE = 3     # All information including debug details


class ExpressionEngineLogger:
    """
    Centralized logger for the expression engine
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('symbolic_expressions')
        self.logger.setLevel(logging.DEBUG)
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_expressions_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def detail(self, message: str):
        """Per-call summaries such as token counts"""
        if self._should_log(LogLevel.DETAILED):
            self.logger.info(message)

    def warning(self, message: str):
        """Input that was skipped or repaired"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[ExpressionEngineLogger] = None


def get_logger() -> ExpressionEngineLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionEngineLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None or (_global_logger.log_level == LogLevel.SILENT) != (level == LogLevel.SILENT):
        # Handlers depend on whether the logger is silent, so rebuild them
        _global_logger = ExpressionEngineLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ExpressionEngineLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = ExpressionEngineLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


def log_detail(message: str):
    get_logger().detail(message)


def log_warning(message: str):
    get_logger().warning(message)


def log_debug(message: str):
    get_logger().debug(message)
