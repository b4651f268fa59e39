#!/usr/bin/env python3
"""
Logging utilities for the Catbox uploader.
Provides a rotating file logger with console output on stderr.
"""

import os
import sys
import logging
from logging.handlers import RotatingFileHandler

def setup_logging(log_folder='.', log_basename='catbox', max_bytes=5*1024*1024, backup_count=10, verbose=False):
    """
    Configure a rotating file logger with console output.

    The console handler writes to stderr so that diagnostics never mix with
    the progress line and the resulting URL on stdout.

    Args:
        log_folder: Folder where log files will be stored (default: current directory)
        log_basename: Base name for log files (default: 'catbox')
        max_bytes: Maximum size of the log file before rotation in bytes (default: 5MB)
        backup_count: Number of backup files to keep (default: 10)
        verbose: Whether to show debug output in the console

    Returns:
        The configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Clear existing handlers to avoid duplication
    logger.handlers = []

    # Console handler - warnings and errors only, unless verbose
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    # Rotating file handler - logs everything to file with rotation
    log_file = os.path.join(log_folder, f"{log_basename}_0.log")
    try:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
    except OSError as e:
        logger.warning(f"Warning: File logging disabled, cannot write {log_file}: {e}")
        return logger
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    logger.addHandler(file_handler)

    return logger

def get_logger(name):
    """
    Get a named logger.

    Args:
        name: The name for the logger

    Returns:
        A named logger
    """
    return logging.getLogger(name)
