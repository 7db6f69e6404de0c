#!/usr/bin/env python3
"""
Level Settings Module

Node-wide default level plus per-logger overrides, keyed by logger name.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from .configuration import DEFAULT_LEVEL_KEY, DEFAULT_LOG_LEVEL, LEVEL_KEY_PREFIX
from .levels import parse_level


@dataclass(frozen=True)
class LevelSettings:
    """
    Logging levels for a process.
    
    Attributes:
        default_level: Level applied to the root logger
        overrides: Logger name -> level, where None means inherit from the nearest ancestor
    """
    default_level: int = parse_level(DEFAULT_LOG_LEVEL)
    overrides: Dict[str, Optional[int]] = field(default_factory=dict)
    
    @classmethod
    def from_mapping(cls, values: Mapping[str, Optional[str]]) -> "LevelSettings":
        """
        Build settings from 'logger.level' and 'logger.<name>' keys.
        
        Args:
            values: Setting key -> level name; other keys are ignored
            
        Returns:
            LevelSettings: Parsed settings
            
        Raises:
            InvalidLevel: If any value is not a known level name
        """
        value = values.get(DEFAULT_LEVEL_KEY)
        default_level = parse_level(DEFAULT_LOG_LEVEL if value is None else value)
        overrides: Dict[str, Optional[int]] = {}
        for key, value in values.items():
            if key == DEFAULT_LEVEL_KEY or not key.startswith(LEVEL_KEY_PREFIX):
                continue
            name = key[len(LEVEL_KEY_PREFIX):]
            if name:
                overrides[name] = parse_level(value)
        return cls(default_level=default_level, overrides=overrides)
    
    @classmethod
    def from_env_file(cls, path: Optional[str] = None) -> "LevelSettings":
        """
        Build settings from a dotenv file, with the process environment taking precedence.
        
        Args:
            path: Path to the dotenv file; None searches for '.env'
        """
        values: Dict[str, Optional[str]] = dict(dotenv_values(path))
        values.update(os.environ)
        return cls.from_mapping(values)
    