"""Runtime tool instances and match results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorKind, MatchError
from .schema import ToolSchema
from .tokens import SourceSpan, Token


class Tool(BaseModel):
    """A running tool, created from a successful match.

    Immutable: each tick the tracker swaps in a copy with one tick less.
    `ticks_remaining` is None for tools that run until turned off or replaced.
    """

    model_config = ConfigDict(frozen=True)

    tool: str
    from_line: int = Field(ge=0)
    start_col: int = Field(ge=0)  # First character of the tool name
    end_col: int = Field(ge=0)  # Character after the last argument
    priority_index: int = Field(ge=0)
    activated_tick: int = 0
    ticks_remaining: int | None = Field(default=None, ge=0)

    @property
    def is_unbounded(self) -> bool:
        return self.ticks_remaining is None

    def with_tick_elapsed(self) -> Tool:
        """Return a copy with one tick less remaining."""
        if self.ticks_remaining is None:
            return self
        return self.model_copy(update={"ticks_remaining": max(0, self.ticks_remaining - 1)})


@dataclass(frozen=True)
class MatchResult:
    """Result of matching one tool invocation against its schema.

    Attributes:
        tool: Tool name as written in the script
        success: Whether the tokens form a valid invocation
        values: Bound values, one slot per grammar node (None = absent)
        is_off: The invocation was a lone "off"
        extra: Unmatched tokens accepted by tools taking arbitrary arguments
        error: Validation failure, when not successful
        span: Source span from the tool name to the last argument
        schema: Schema the tokens were matched against
    """

    tool: str
    success: bool
    values: tuple[Any, ...] = ()
    is_off: bool = False
    extra: tuple[Token, ...] = ()
    error: MatchError | None = None
    span: SourceSpan | None = None
    schema: ToolSchema | None = None

    @classmethod
    def ok(
        cls,
        schema: ToolSchema,
        values: list[Any] | tuple[Any, ...],
        span: SourceSpan | None = None,
        extra: list[Token] | tuple[Token, ...] = (),
    ) -> MatchResult:
        """Create a successful result."""
        return cls(
            tool=schema.name,
            success=True,
            values=tuple(values),
            extra=tuple(extra),
            span=span,
            schema=schema,
        )

    @classmethod
    def off(cls, schema: ToolSchema, span: SourceSpan | None = None) -> MatchResult:
        """Create a successful "off" result."""
        return cls(
            tool=schema.name,
            success=True,
            values=(None,) * schema.slot_count,
            is_off=True,
            span=span,
            schema=schema,
        )

    @classmethod
    def fail(
        cls,
        tool: str,
        kind: ErrorKind,
        message: str,
        span: SourceSpan | None = None,
        schema: ToolSchema | None = None,
    ) -> MatchResult:
        """Create a failure result."""
        return cls(
            tool=tool,
            success=False,
            error=MatchError(kind=kind, message=message, span=span),
            span=span,
            schema=schema,
        )

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    def value_at(self, index: int) -> Any:
        if 0 <= index < len(self.values):
            return self.values[index]
        return None

    def named(self) -> dict[str, Any]:
        """Bound values of keyed slots that were matched."""
        if self.schema is None:
            return {}
        return {
            node.key: self.values[index]
            for index, node in enumerate(self.schema.slots())
            if node.key is not None and self.value_at(index) is not None
        }

    @property
    def duration(self) -> int | None:
        """Bound duration in ticks, or None if the tool runs unbounded."""
        if self.schema is None or not self.schema.has_duration:
            return None
        value = self.value_at(self.schema.duration_index)
        return int(value) if value is not None else None

    @property
    def extra_text(self) -> str:
        """Arbitrary trailing arguments joined back into text (e.g. a console command)."""
        return " ".join(token.text for token in self.extra)
