"""Domain models: tokens, grammar schemas, runtime tools, errors."""

from .tokens import TokenKind, Token, SourceSpan, span_of
from .errors import ErrorKind, MatchError, CatalogueError
from .schema import (
    NO_DURATION,
    EASING_TYPES,
    ArgumentNode,
    ToolSchema,
    keyword,
    number,
    word,
    ticks,
    iter_slots,
    slot_count,
)
from .tool import Tool, MatchResult
from .player import Vector, Angles, PlayerState, angle_difference
from .catalogue import CATALOGUE

__all__ = [
    # Tokens
    "TokenKind",
    "Token",
    "SourceSpan",
    "span_of",
    # Errors
    "ErrorKind",
    "MatchError",
    "CatalogueError",
    # Schema
    "NO_DURATION",
    "EASING_TYPES",
    "ArgumentNode",
    "ToolSchema",
    "keyword",
    "number",
    "word",
    "ticks",
    "iter_slots",
    "slot_count",
    # Runtime
    "Tool",
    "MatchResult",
    # Player
    "Vector",
    "Angles",
    "PlayerState",
    "angle_difference",
    # Catalogue
    "CATALOGUE",
]
