#!/usr/bin/env python3
"""
Identity Module

Index and shard identities used as logging context, and the naming rule for components.
"""

import inspect
from dataclasses import dataclass
from typing import Any

UNKNOWN_INDEX_UUID = "_na_"


@dataclass(frozen=True)
class Index:
    """
    Identity of an index.
    
    Attributes:
        name: The index name
        uuid: The index uuid, or "_na_" when not known
    """
    name: str
    uuid: str = UNKNOWN_INDEX_UUID
    
    def __str__(self) -> str:
        return f"[{self.name}/{self.uuid}]"


@dataclass(frozen=True)
class ShardId:
    """
    Identity of a single shard within an index.
    
    Attributes:
        index: The index the shard belongs to
        id: The numeric shard id
    """
    index: Index
    id: int
    
    @property
    def index_name(self) -> str:
        return self.index.name
    
    @property
    def logger_name(self) -> str:
        """Backend logger name for this shard, e.g. 'logs[3]'."""
        return f"{self.index_name}[{self.id}]"
    
    def __str__(self) -> str:
        return f"[{self.index_name}][{self.id}]"


def component_name(component: Any) -> str:
    """
    Derive a backend logger name from a component identity.
    
    Args:
        component: A logger name string, a module, or a class or function
        
    Returns:
        str: The logger name ('package.module.Qualified' for classes and functions)
    """
    if isinstance(component, str):
        return component
    if inspect.ismodule(component):
        return component.__name__
    qualname = getattr(component, "__qualname__", None)
    if qualname is None:
        raise TypeError(f"Cannot derive a logger name from {component!r}")
    return f"{component.__module__}.{qualname}"
