"""Validation error taxonomy for tool invocations.

Every user-facing failure is a value: a MatchError attached to a failed
MatchResult. None of them abort a script, only the one invocation.
Exceptions are reserved for catalogue-authoring defects.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .tokens import SourceSpan


class ErrorKind(Enum):
    """Kinds of line-scoped validation failures."""

    UNKNOWN_TOOL = "unknown_tool"
    MISSING_ARGUMENTS = "missing_arguments"
    TRAILING_ARGUMENTS = "trailing_arguments"
    ARGUMENT_MISMATCH = "argument_mismatch"
    TYPE_MISMATCH = "type_mismatch"
    UNIT_MISMATCH = "unit_mismatch"
    OFF_MUST_BE_ALONE = "off_must_be_alone"
    UNKNOWN_ARGUMENT = "unknown_argument"
    DUPLICATE_ARGUMENT = "duplicate_argument"
    CONFLICTING_ARGUMENTS = "conflicting_arguments"
    OUT_OF_RANGE = "out_of_range"


class MatchError(BaseModel):
    """A structured validation error with its source position."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    span: SourceSpan | None = None

    def __str__(self) -> str:
        if self.span is None:
            return f"{self.kind.value}: {self.message}"
        return (
            f"{self.span.line}:{self.span.start_col}-{self.span.end_col} "
            f"{self.kind.value}: {self.message}"
        )


class CatalogueError(Exception):
    """A tool definition is malformed. Raised at import, never for user input."""

    pass
