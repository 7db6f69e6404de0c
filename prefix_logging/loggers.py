#!/usr/bin/env python3
"""
Loggers Module

Factory for decorated loggers carrying index and shard context.

Prefixes are attached once, when a logger is first acquired for a component,
shard or index. Child loggers derived from a PrefixedLogger inherit that exact
prefix; only the backend logger name grows.
"""

import logging
from typing import Any, Optional, Type, Union

from .backend import LogBackend, StdlibLogBackend
from .identity import Index, ShardId, component_name
from .levels import parse_level
from .log_wrapper import BareLogger, LoggerKind, LoggerRef, PrefixedLogger
from .prefix import SEPARATOR, format_prefix


class Loggers:
    """Creates logger references through an explicitly supplied backend."""
    
    def __init__(self, backend: LogBackend):
        self.backend = backend
    
    def get_shard_logger(self, component: Any, shard_id: ShardId, *prefixes: Optional[str]) -> PrefixedLogger:
        """
        Get a logger for a component working on a shard.
        
        Args:
            component: Component identity the backend logger is named after
            shard_id: Shard whose index name and id lead the prefix
            *prefixes: Extra fragments appended after the shard id
            
        Returns:
            PrefixedLogger: Logger with prefix '[index][id]...'
        """
        return self.get_logger(component, shard_id.index_name, str(shard_id.id), *prefixes)
    
    def get_named_shard_logger(self, logger_name: Optional[str], shard_id: ShardId) -> PrefixedLogger:
        """
        Get a logger by explicit name for a shard, with no extra fragments.
        
        Args:
            logger_name: Backend logger name; None uses 'index[id]'
            shard_id: Shard whose index name and id make up the prefix
            
        Returns:
            PrefixedLogger: Logger with prefix '[index][id]'
        """
        if logger_name is None:
            logger_name = shard_id.logger_name
        prefix = format_prefix(shard_id.index_name, str(shard_id.id))
        return PrefixedLogger(self.backend.get_or_create(logger_name), prefix)
    
    def get_index_logger(self, component: Any, index: Index, *prefixes: Optional[str]) -> PrefixedLogger:
        """
        Get a logger for a component working on an index.
        
        The prefix starts with a space so it reads ' [index]...' after the log line header.
        """
        return self.get_logger(component, SEPARATOR, index.name, *prefixes)
    
    def get_logger(self, component: Any, *prefixes: Optional[str]) -> PrefixedLogger:
        """Get a logger for a component with free-form prefix fragments."""
        handle = self.backend.get_or_create(component_name(component))
        return PrefixedLogger(handle, format_prefix(*prefixes))
    
    def get_child_logger(self, parent: Union[LoggerRef, logging.Logger], suffix: str) -> LoggerRef:
        """
        Derive a child logger named parent name + suffix.
        
        Args:
            parent: A logger reference, or a raw backend logger treated as bare
            suffix: Appended to the parent name as-is, e.g. '.recovery'
            
        Returns:
            LoggerRef: PrefixedLogger with the parent's prefix when the parent is
            prefixed, otherwise a BareLogger
        """
        if isinstance(parent, logging.Logger):
            parent = BareLogger(parent)
        handle = self.backend.get_or_create(parent.name + suffix)
        if parent.kind is LoggerKind.PREFIXED:
            return PrefixedLogger(handle, parent.prefix)
        return BareLogger(handle)
    
    def set_level(self, logger: LoggerRef, level: Optional[str]) -> None:
        """
        Set the level of a logger. None means inherit from the nearest ancestor.
        
        Raises:
            InvalidLevel: If level is not a known level name
        """
        self.backend.set_level(logger.handle, parse_level(level))
    
    def add_appender(self, logger: LoggerRef, appender: logging.Handler) -> None:
        self.backend.add_appender(logger.handle, appender)
    
    def remove_appender(self, logger: LoggerRef, appender: logging.Handler) -> None:
        self.backend.remove_appender(logger.handle, appender)
    
    def find_appender(self, logger: LoggerRef, appender_type: Type[Any]) -> Optional[logging.Handler]:
        return self.backend.find_appender(logger.handle, appender_type)


_default = Loggers(StdlibLogBackend())

get_shard_logger = _default.get_shard_logger
get_named_shard_logger = _default.get_named_shard_logger
get_index_logger = _default.get_index_logger
get_logger = _default.get_logger
get_child_logger = _default.get_child_logger
set_level = _default.set_level
add_appender = _default.add_appender
remove_appender = _default.remove_appender
find_appender = _default.find_appender
