"""Token types consumed from the script tokenizer.

The tokenizer itself lives outside this package; it hands us a flat sequence
of typed tokens per script line, each tagged with its source position.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(Enum):
    """Lexical category of a token."""

    STRING = "string"
    NUMBER = "number"


class SourceSpan(BaseModel):
    """A range of columns on one script line."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    start_col: int = Field(ge=0)
    end_col: int = Field(ge=0)

    @classmethod
    def covering(cls, first: SourceSpan, last: SourceSpan) -> SourceSpan:
        """Span from the start of `first` to the end of `last`."""
        return cls(line=first.line, start_col=first.start_col, end_col=last.end_col)


class Token(BaseModel):
    """A single token as produced by the tokenizer.

    Numeric tokens keep their raw text, including any unit suffix
    (e.g. "10deg", "299.999ups").
    """

    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    text: str
    line: int = Field(ge=0)
    start_col: int = Field(ge=0)
    end_col: int = Field(ge=0)

    @property
    def span(self) -> SourceSpan:
        return SourceSpan(line=self.line, start_col=self.start_col, end_col=self.end_col)

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    def matches_keyword(self, keyword: str) -> bool:
        """Keywords compare case-insensitively."""
        return self.text.lower() == keyword.lower()


def span_of(tokens: Iterable[Token]) -> SourceSpan | None:
    """Span covering a run of tokens, or None if there are none."""
    tokens = list(tokens)
    if not tokens:
        return None
    return SourceSpan.covering(tokens[0].span, tokens[-1].span)
