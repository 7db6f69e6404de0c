#!/usr/bin/env python3
"""
Prefix Logging Package for attaching index and shard context to log messages.
"""

from .backend import LogBackend, StdlibLogBackend
from .identity import Index, ShardId
from .levels import InvalidLevel, parse_level
from .log_wrapper import BareLogger, LoggerKind, LoggerRef, PrefixedLogger
from .loggers import (
    Loggers,
    add_appender,
    find_appender,
    get_child_logger,
    get_index_logger,
    get_logger,
    get_named_shard_logger,
    get_shard_logger,
    remove_appender,
    set_level,
)
from .logging_config import setup_logging
from .prefix import SEPARATOR, format_prefix
from .settings import LevelSettings

__all__ = [
    'LogBackend',
    'StdlibLogBackend',
    'Index',
    'ShardId',
    'InvalidLevel',
    'parse_level',
    'BareLogger',
    'LoggerKind',
    'LoggerRef',
    'PrefixedLogger',
    'Loggers',
    'add_appender',
    'find_appender',
    'get_child_logger',
    'get_index_logger',
    'get_logger',
    'get_named_shard_logger',
    'get_shard_logger',
    'remove_appender',
    'set_level',
    'setup_logging',
    'SEPARATOR',
    'format_prefix',
    'LevelSettings',
]
