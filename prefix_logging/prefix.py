#!/usr/bin/env python3
"""
Prefix Formatting Module

Builds the bracketed context tag that decorated loggers put in front of every message.
"""

from typing import Optional

SEPARATOR = " "  # Reserved fragment that emits a literal space instead of brackets


def format_prefix(*fragments: Optional[str]) -> Optional[str]:
    """
    Format context fragments into a single prefix.
    
    Each non-null fragment is wrapped in square brackets, in order. The
    SEPARATOR fragment emits one space instead; consecutive separators are
    not collapsed.
    
    Args:
        *fragments: Context fragments such as an index name or a shard id
        
    Returns:
        Optional[str]: The prefix, or None when no fragment produced output
    """
    parts = []
    for fragment in fragments:
        if fragment is None:
            continue
        if fragment == SEPARATOR:
            parts.append(" ")
        else:
            parts.append(f"[{fragment}]")
    
    prefix = "".join(parts)
    return prefix if prefix else None
