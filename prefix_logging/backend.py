#!/usr/bin/env python3
"""
Log Backend Module

The capability the logger factory delegates to for obtaining named loggers.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Type


class LogBackend(ABC):
    """
    Provider of named backend loggers.
    
    Level and appender management belong to the backend's own configuration;
    the factory only forwards those calls so callers can rely on them succeeding.
    """
    
    @abstractmethod
    def get_or_create(self, name: str) -> logging.Logger:
        """Return the logger registered under name, creating it if needed."""
    
    def set_level(self, handle: logging.Logger, level: Optional[int]) -> None:
        """Delegated to backend configuration; no local effect."""
    
    def add_appender(self, handle: logging.Logger, appender: logging.Handler) -> None:
        """Delegated to backend configuration; no local effect."""
    
    def remove_appender(self, handle: logging.Logger, appender: logging.Handler) -> None:
        """Delegated to backend configuration; no local effect."""
    
    def find_appender(self, handle: logging.Logger, appender_type: Type[Any]) -> Optional[logging.Handler]:
        """Delegated to backend configuration; always None here."""
        return None


class StdlibLogBackend(LogBackend):
    """Backend over the standard library logger registry."""
    
    def get_or_create(self, name: str) -> logging.Logger:
        return logging.getLogger(name)
