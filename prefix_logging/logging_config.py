#!/usr/bin/env python3
"""
Logging Configuration Module

Applies level settings and handlers to the standard library logging backend.
"""

import logging
import os
import sys
from typing import Optional

from .configuration import LOG_DATE_FORMAT, LOG_FILE_NAME, LOG_FORMAT
from .levels import level_name
from .loggers import get_logger
from .settings import LevelSettings

logger = get_logger(__name__)


def _is_stdout_handler(handler: logging.Handler) -> bool:
    return type(handler) is logging.StreamHandler and handler.stream is sys.stdout


def setup_logging(settings: LevelSettings, log_dir: Optional[str] = None) -> Optional[str]:
    """
    Set up logging for the process from level settings.
    
    Args:
        settings: Default level and per-logger overrides to apply
        log_dir: Optional directory for a detailed log file
        
    Returns:
        Optional[str]: Path to the log file, or None when no file handler was added
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    
    root = logging.getLogger()
    root.setLevel(settings.default_level)
    
    if not any(_is_stdout_handler(handler) for handler in root.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
    
    for name, level in settings.overrides.items():
        logging.getLogger(name).setLevel(logging.NOTSET if level is None else level)
        logger.debug(f"Set level of {name} to {level_name(level) or 'inherit'}")
    
    if log_dir is None:
        return None
    
    log_dir = os.path.join(log_dir, "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_filename = os.path.join(log_dir, LOG_FILE_NAME)
    
    if any(getattr(handler, "baseFilename", None) == os.path.abspath(log_filename) for handler in root.handlers):
        return log_filename
    
    # Create file handler for detailed logging
    file_handler = logging.FileHandler(log_filename)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
    
    return log_filename
