#!/usr/bin/env python3
"""
Configuration variables for logging setup.
"""

DEFAULT_LOG_LEVEL = "INFO" # Level used when logger.level is not set
DEFAULT_LEVEL_KEY = "logger.level"
LEVEL_KEY_PREFIX = "logger." # Per-logger overrides are keyed logger.<name>

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "prefix_logging.log"
