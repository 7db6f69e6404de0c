#!/usr/bin/env python3
"""
Logging Wrapper Module

Logger references that pair a backend logger with an optional context prefix.
A PrefixedLogger puts its prefix in front of every message; a BareLogger
passes messages through unchanged.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional, Union


class LoggerKind(Enum):
    """Variant tag of a logger reference."""
    BARE = "bare"
    PREFIXED = "prefixed"


class _LoggerMethods:
    """Emit methods shared by both logger variants."""
    
    handle: logging.Logger
    prefix: Optional[str]
    
    @property
    def name(self) -> str:
        return self.handle.name
    
    def decorate(self, message: str) -> str:
        """Return message with the prefix in front, or unchanged when there is none."""
        if self.prefix is None:
            return message
        return f"{self.prefix} {message}"
    
    def is_enabled_for(self, level: int) -> bool:
        return self.handle.isEnabledFor(level)
    
    def _emit(self, level: int, message: str, args: tuple, kwargs: dict) -> None:
        if not self.handle.isEnabledFor(level):
            return
        if self.prefix is not None and args:
            # Prefix text must not take part in %-interpolation
            message = f"{self.prefix.replace('%', '%%')} {message}"
        else:
            message = self.decorate(message)
        kwargs.setdefault("stacklevel", 3)
        self.handle.log(level, message, *args, **kwargs)
    
    def log(self, level: int, message: str, *args: Any, **kwargs: Any) -> None:
        self._emit(level, message, args, kwargs)
    
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""
        self._emit(logging.DEBUG, message, args, kwargs)
    
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log info message."""
        self._emit(logging.INFO, message, args, kwargs)
    
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""
        self._emit(logging.WARNING, message, args, kwargs)
    
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log error message."""
        self._emit(logging.ERROR, message, args, kwargs)
    
    def critical(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log critical message."""
        self._emit(logging.CRITICAL, message, args, kwargs)
    
    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log error message with the active exception's traceback."""
        kwargs.setdefault("exc_info", True)
        self._emit(logging.ERROR, message, args, kwargs)


@dataclass(frozen=True)
class BareLogger(_LoggerMethods):
    """Reference to a backend logger without any prefix."""
    kind: ClassVar[LoggerKind] = LoggerKind.BARE
    
    handle: logging.Logger
    
    @property
    def prefix(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class PrefixedLogger(_LoggerMethods):
    """
    Backend logger paired with an immutable context prefix.
    
    Attributes:
        handle: The backend logger messages are emitted through
        prefix: Formatted context such as '[logs][3]', or None for no prefix
    """
    kind: ClassVar[LoggerKind] = LoggerKind.PREFIXED
    
    handle: logging.Logger
    prefix: Optional[str] = None


LoggerRef = Union[BareLogger, PrefixedLogger]
