"""
Runtime layer - matching invocations and running scripts.

- match(): validate one invocation against its schema
- ScriptSession: per-script context driven by an external executor
"""

from .matcher import match, split_number, unit_accepts, OFF_KEYWORD
from .session import ScriptSession

__all__ = [
    "match",
    "split_number",
    "unit_accepts",
    "OFF_KEYWORD",
    "ScriptSession",
]
