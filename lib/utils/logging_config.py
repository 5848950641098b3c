"""
Logging Configuration

Structured console/file logging for the comparator:
- One line per record: [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE {context}
- Level from LOG_LEVEL (default INFO)
- Timing helper for slow calculations and chart builds

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


class StructuredFormatter(logging.Formatter):
    """
    Formatter producing grep-friendly single-line records.

    Extra context can be attached with ``logger.info(msg, extra={"calc_context": "..."})``.
    """

    def format(self, record: logging.LogRecord) -> str:
        context = getattr(record, 'calc_context', '')

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        location = f"{record.module}:{record.funcName}:{record.lineno}"

        message = f"[{timestamp}] [{record.levelname:8s}] [{location}] {record.getMessage()}"

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        if context:
            message += f" {context}"

        return message


class PerformanceLogger:
    """Context manager that logs how long a block took."""

    def __init__(self, logger: logging.Logger, operation: str, threshold_ms: float = 250):
        self.logger = logger
        self.operation = operation
        self.threshold_ms = threshold_ms
        self.start_time = None
        self.duration_ms = None

    def __enter__(self):
        self.start_time = datetime.now()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time:
            self.duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000

            if self.duration_ms > self.threshold_ms:
                self.logger.warning(f"SLOW: {self.operation} took {self.duration_ms:.1f}ms")
            else:
                self.logger.debug(f"{self.operation} took {self.duration_ms:.1f}ms")


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with structured formatting and optional file output.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO
        log_file: Optional file path for logs

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Already configured
    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO')

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file is None:
        log_file = os.getenv('LOG_FILE')

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def get_perf_logger(logger: logging.Logger, operation: str, threshold_ms: float = 250):
    """
    Get a performance logger context manager.

    Usage:
        with get_perf_logger(logger, "savings_curve", threshold_ms=100):
            df = savings_curve(incomes)
    """
    return PerformanceLogger(logger, operation, threshold_ms)


def log_dataframe_info(logger: logging.Logger, df, name: str = "DataFrame"):
    """Log row/column counts of a pandas DataFrame."""
    if df is None:
        logger.warning(f"{name} is None")
        return

    if df.empty:
        logger.info(f"{name} is empty (0 rows)")
    else:
        logger.debug(f"{name}: {len(df)} rows, {len(df.columns)} columns")
