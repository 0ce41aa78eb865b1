"""
GCE Ops - Logging Setup

This module sets up logging for GCE Ops commands.

Logging Strategy:
- INFO (default): High-level progress for end users
- DEBUG (--verbosity=debug): API calls, poll results, timings
- WARNING: Operation warnings reported by Compute Engine
- ERROR: Problems that stop a command

Console logs go to stderr; stdout is reserved for command results.
"""

import logging
import sys
from pathlib import Path
from typing import Any

LOGGER_NAME = 'gce_ops'


class CleanFormatter(logging.Formatter):
    """
    Custom formatter for clean user-facing logs.

    - INFO: Just the message (clean)
    - WARNING/ERROR/CRITICAL: Show level with emphasis
    - ERROR: also tagged "(gce-ops)" like gcloud tags its errors
    """

    def format(self, record):
        """Format log record based on level."""

        if record.levelno == logging.INFO:
            return record.getMessage()

        elif record.levelno == logging.WARNING:
            return f"WARNING: {record.getMessage()}"

        elif record.levelno == logging.ERROR:
            return f"ERROR: (gce-ops) {record.getMessage()}"

        elif record.levelno == logging.CRITICAL:
            return f"CRITICAL: {record.getMessage()}"

        else:
            return f"[DEBUG] {record.getMessage()}"


def setup_logging(level='INFO', log_file=None, debug=False, stream=None):
    """
    Setup logging for GCE Ops.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If None, only logs to console.
        debug: If True, use DEBUG level and detailed format
        stream: Console stream (default: stderr)

    Returns:
        logging.Logger: Configured logger instance

    Example:
        logger = setup_logging('INFO')
        logger.info("Deleting 3 disks...")

        logger = setup_logging(debug=True)
        logger.debug("API call: zoneOperations.get(...)")
    """

    if debug:
        level = 'DEBUG'

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Remove existing handlers (in case setup_logging called multiple times)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(numeric_level)

    if debug:
        # Format: [2025-11-02 10:30:45] DEBUG [wait:112]: Operation operation-1: RUNNING
        console_format = logging.Formatter(
            '[%(asctime)s] %(levelname)s [%(funcName)s:%(lineno)d]: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        console_format = CleanFormatter('%(message)s')

    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)

        # File format includes more details
        file_format = logging.Formatter(
            '[%(asctime)s] %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

        logger.debug(f"Logging to file: {log_file}")

    return logger


def get_logger():
    """
    Get the GCE Ops logger instance.

    Example:
        from gce_ops.utils.logger import get_logger
        logger = get_logger()
        logger.info("Hello!")
    """
    return logging.getLogger(LOGGER_NAME)


def log_api_call(logger, method_name: str, **params):
    """
    Log an API call (DEBUG level).

    Example:
        log_api_call(logger, 'disks.delete', project='p', zone='us-central1-a', disk='d1')
        # Output: API call: disks.delete(project=p, zone=us-central1-a, disk=d1)
    """
    param_str = ', '.join(f'{k}={v}' for k, v in params.items())
    logger.debug(f"API call: {method_name}({param_str})")


def log_api_response(logger, response: Any, truncate: int = 200):
    """
    Log an API response (DEBUG level), truncated to `truncate` characters.
    """
    response_str = str(response)
    if len(response_str) > truncate:
        response_str = response_str[:truncate] + '...'
    logger.debug(f"API response: {response_str}")
