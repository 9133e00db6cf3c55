"""
tastools - tool grammar and active-tool state for TAS scripts.

Validates tool invocations (`duck 20`, `strafe 299.999ups left veccam`, ...)
against a fixed catalogue of argument grammars, and tracks which tools are
running on each tick of a script.

Example usage:
    from tastools import ScriptSession

    session = ScriptSession()
    result = session.invoke(tokens, tick=0)  # tokens from the tokenizer
    if not result.success:
        print(result.error)
    session.advance_tick()
    for tool in session.active_tools():
        ...
"""

__version__ = "0.1.0"

from .config import ScriptConfig
from .domain import ErrorKind, MatchError, MatchResult, Token, TokenKind, Tool, ToolSchema
from .runtime import ScriptSession, match
from .services import TOOL_REGISTRY, ActiveToolTracker, CheckCoordinator, CheckOutcome
from .logging_config import setup_logging

__all__ = [
    "__version__",
    "ScriptConfig",
    "ErrorKind",
    "MatchError",
    "MatchResult",
    "Token",
    "TokenKind",
    "Tool",
    "ToolSchema",
    "ScriptSession",
    "match",
    "TOOL_REGISTRY",
    "ActiveToolTracker",
    "CheckCoordinator",
    "CheckOutcome",
    "setup_logging",
]
