#!/usr/bin/env python3
"""
Log Level Parsing Module

Maps level names onto standard library logging levels.
"""

import logging
from typing import Dict, Optional

ALL = 1 # Lowest enabled level; NOTSET is reserved for inherit
TRACE = 5
OFF = logging.CRITICAL + 10

logging.addLevelName(ALL, "ALL")
logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(OFF, "OFF")

LEVELS: Dict[str, int] = {
    "OFF": OFF,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "TRACE": TRACE,
    "ALL": ALL,
    "NOTSET": logging.NOTSET,
}


class InvalidLevel(ValueError):
    """Raised when a level name does not name a known log level."""
    
    def __init__(self, value: str):
        super().__init__(f"Invalid log level: {value!r}")
        self.value = value


def parse_level(name: Optional[str]) -> Optional[int]:
    """
    Parse a level name.
    
    Args:
        name: Level name (case-insensitive), or None to inherit from the nearest ancestor
        
    Returns:
        Optional[int]: The logging level, or None for inherit
        
    Raises:
        InvalidLevel: If the name is not a known level
    """
    if name is None:
        return None
    level = LEVELS.get(str(name).strip().upper())
    if level is None:
        raise InvalidLevel(name)
    return level


def level_name(level: Optional[int]) -> Optional[str]:
    """Return the canonical name for a level, or None for inherit."""
    if level is None:
        return None
    return logging.getLevelName(level)
