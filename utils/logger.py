# utils/logger.py
# This file is part of Lineage - A Data Lineage Library
#
# Logging utility for lineage queries with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, TextIO


class LogLevel(Enum):
    """Log levels for lineage computations."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LineageLogger:
    """Logger shared by the lineage packages.

    Queries and node creation are reported at DEBUG level; condition
    verdicts and CLI output at INFO level.
    """

    def __init__(
        self,
        name: str = "lineage",
        level: LogLevel = LogLevel.INFO,
        stream: Optional[TextIO] = None,
    ):
        """Initialize the lineage logger.

        Args:
            name: Name of the underlying logging.Logger
            level: Initial logging level
            stream: Output stream of the console handler (stdout by default)
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # A single console handler, even when re-created
        self.logger.handlers.clear()

        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setLevel(level.value)
        handler.setFormatter(LineageFormatter())
        self.logger.addHandler(handler)

        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the level of the logger and of its handlers."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log a query step or node creation."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log a verdict or user-facing output."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    # Specialized methods for lineage queries
    def query_started(self, value: str, designator: str, context: str = ""):
        """Log the start of a provenance query on a value."""
        context_str = f" in context {context}" if context else ""
        self.debug(f"    🔎 Query '{designator}' on {value}{context_str}")

    def node_cached(self, node_id: int, designated: str):
        """Log reuse of a cached object node."""
        self.debug(f"      ♻️  Reusing object node #{node_id} for {designated}")

    def node_created(self, kind: str, node_id: int, detail: Optional[str] = None):
        """Log creation of a traceability node."""
        detail_str = f" ({detail})" if detail else ""
        self.debug(f"      ➕ {kind} node #{node_id}{detail_str}")

    def unresolved(self, value: str, designator: str):
        """Log a query whose provenance cannot be determined."""
        self.debug(f"    ❓ No provenance for '{designator}' on {value}")

    def verdict(self, index: int, holds: bool):
        """Log the outcome of a single condition."""
        if holds:
            self.info(f"  Condition {index}: ✅ fulfilled")
        else:
            self.info(f"  Condition {index}: ❌ violated")


class LineageFormatter(logging.Formatter):
    """Plain messages at INFO level, level-prefixed messages otherwise."""

    def format(self, record):
        message = record.getMessage()
        if record.levelno == logging.INFO:
            return message
        return f"[{record.levelname}] {message}"


# Shared by every module through get_logger
_global_logger: Optional[LineageLogger] = None


def get_logger(name: str = "lineage") -> LineageLogger:
    """Get the shared lineage logger, creating it on first use.

    Args:
        name: Name of the underlying logger; only used on creation
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = LineageLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the level of the shared lineage logger."""
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure the shared logger from verbosity flags.

    Without flags only warnings and errors are shown; verbose adds condition
    verdicts, debug adds every query step and created node.
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
