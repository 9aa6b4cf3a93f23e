"""
Logging Configuration

Component loggers for the matcher. The library modules only create
loggers; handlers are installed by setup_logging(), which the command
line front end calls once at startup.
"""

import logging
import sys
from typing import Optional

from .config import LOG_FORMAT, LOG_DATE_FORMAT


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGER CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "WARNING", log_file: Optional[str] = None):
    """
    Configure logging for the whole package.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # stdout carries matching lines
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger("rematch")

    # Prevent duplicate logs if setup_logging() is called again
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


# ═══════════════════════════════════════════════════════════════════════════════
# COMPONENT LOGGERS
# ═══════════════════════════════════════════════════════════════════════════════

logger_pipeline = logging.getLogger("rematch.pipeline")
logger_cli = logging.getLogger("rematch.cli")


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING UTILITIES
# ═══════════════════════════════════════════════════════════════════════════════

def format_dict(data: dict) -> str:
    return " | ".join(f"{k}={v}" for k, v in data.items())


def log_compile(pattern: str, num_symbols: int, anchored: bool):
    """Log a compiled pattern"""
    context = {"pattern": pattern[:80], "symbols": num_symbols, "anchored": anchored}
    logger_pipeline.debug(f"COMPILE | {format_dict(context)}")


def log_anchor_violation(pattern: str, index: int, message: str):
    """Log a misplaced anchor"""
    context = {"pattern": pattern[:80], "index": index, "message": message}
    logger_pipeline.error(f"ANCHOR_VIOLATION | {format_dict(context)}")
