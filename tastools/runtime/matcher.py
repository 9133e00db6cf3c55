"""
Argument matcher - validates a tool invocation against its grammar.

Given a ToolSchema and the tokens following the tool name, decides whether
the tokens are a valid instantiation of the grammar and binds them into the
schema's slot list.

Matching rules:
- Ordered grammars are walked left to right with a single cursor
- Unordered grammars treat every top-level node as a flag usable once
- Keyword commit is irrevocable: once a keyword matched, a failure in its
  children fails the node; there is no fallback to `otherwise_children`
  and no backtracking across siblings

All failures come back as MatchResult.fail(...), never as exceptions.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable

from tastools.domain import (
    ArgumentNode,
    ErrorKind,
    MatchResult,
    SourceSpan,
    Token,
    TokenKind,
    ToolSchema,
    slot_count,
    span_of,
)


logger = logging.getLogger(__name__)

OFF_KEYWORD = "off"

# Numeric prefix followed by an optional unit suffix ("10deg", "-2.5", ".5ups")
_NUMBER_RE = re.compile(r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+))(.*)$")

# Failures a skipped optional node may swallow
_SOFT_KINDS = frozenset({
    ErrorKind.MISSING_ARGUMENTS,
    ErrorKind.ARGUMENT_MISMATCH,
    ErrorKind.TYPE_MISMATCH,
})


class _NoMatch(Exception):
    """Internal control flow: the walk failed at token `index`."""

    def __init__(self, kind: ErrorKind, message: str, index: int, span: SourceSpan | None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.index = index
        self.span = span

    @property
    def is_soft(self) -> bool:
        return self.kind in _SOFT_KINDS


def match(
    schema: ToolSchema,
    tokens: Iterable[Token],
    name_token: Token | None = None,
) -> MatchResult:
    """Match the argument tokens of one invocation against `schema`.

    Args:
        schema: Grammar of the invoked tool
        tokens: Tokens after the tool name
        name_token: The tool name token, used to anchor spans and to place
            errors that have no token of their own

    Returns:
        Successful MatchResult with bound values, or a failed one carrying
        a MatchError.
    """
    return _Walk(schema, tuple(tokens), name_token).run()


def split_number(text: str) -> tuple[float, str] | None:
    """Split numeric token text into its value and unit suffix."""
    m = _NUMBER_RE.match(text)
    if m is None:
        return None
    digits, suffix = m.groups()
    return float(digits), suffix


def unit_accepts(node: ArgumentNode, suffix: str) -> bool:
    """Whether `suffix` is a legal unit for a numeric node."""
    unit = node.unit_name
    if not suffix:
        return unit is None or node.unit_optional
    return unit is not None and suffix.lower() == unit.lower()


class _Walk:
    """One matching pass over one token list."""

    def __init__(self, schema: ToolSchema, tokens: tuple[Token, ...], name_token: Token | None):
        self._schema = schema
        self._tokens = tokens
        self._name_token = name_token
        self._pos = 0
        self._values: list[Any] = [None] * schema.slot_count
        self._extra: list[Token] = []

    # =========================================================================
    # Entry point
    # =========================================================================

    def run(self) -> MatchResult:
        schema = self._schema
        span = self._full_span()

        if not self._tokens:
            if not schema.expects_arguments or self._all_optional():
                return MatchResult.ok(schema, self._values, span)
            return self._failed(ErrorKind.MISSING_ARGUMENTS, f"'{schema.name}' expects arguments", self._end_span())

        if schema.has_off:
            offs = [t for t in self._tokens if t.matches_keyword(OFF_KEYWORD)]
            if offs:
                if len(self._tokens) == 1:
                    return MatchResult.off(schema, span)
                return self._failed(
                    ErrorKind.OFF_MUST_BE_ALONE,
                    f"'{OFF_KEYWORD}' cannot be combined with other arguments",
                    offs[0].span,
                )

        try:
            if schema.fixed_order:
                self._match_ordered()
            else:
                self._match_unordered()
        except _NoMatch as failure:
            return self._failed(failure.kind, failure.message, failure.span)

        return MatchResult.ok(schema, self._values, span, self._extra)

    def _all_optional(self) -> bool:
        args = self._schema.arguments
        return bool(args) and not any(node.required for node in args)

    # =========================================================================
    # Ordered grammars
    # =========================================================================

    def _match_ordered(self) -> None:
        self._match_sequence(self._schema.arguments, 0)

        if self._pos < len(self._tokens):
            rest = self._tokens[self._pos:]
            if self._schema.allow_arbitrary_arguments:
                self._extra.extend(rest)
                self._pos = len(self._tokens)
                return
            raise _NoMatch(
                ErrorKind.TRAILING_ARGUMENTS,
                f"unexpected argument '{rest[0].text}' for '{self._schema.name}'",
                self._pos,
                span_of(rest),
            )

    def _match_sequence(self, nodes: tuple[ArgumentNode, ...], base: int) -> None:
        offset = base
        for node in nodes:
            self._match_node(node, offset)
            offset += node.size

    def _match_node(self, node: ArgumentNode, offset: int) -> None:
        children_base = offset + 1
        otherwise_base = children_base + slot_count(node.children)

        miss = self._match_head(node, offset)
        if miss is None:
            # Committed: a failing child fails the whole node
            self._match_sequence(node.children, children_base)
            return

        if node.otherwise_children:
            start, saved = self._pos, list(self._values)
            try:
                self._match_sequence(node.otherwise_children, otherwise_base)
                return
            except _NoMatch as failure:
                if not failure.is_soft or failure.index > start:
                    raise
                self._pos, self._values = start, saved
            if node.required:
                kind = ErrorKind.MISSING_ARGUMENTS if self._at_end() else ErrorKind.ARGUMENT_MISMATCH
                raise self._no_match(kind, f"expected {node.label()} or its alternative")
            return

        if node.required:
            raise miss

    def _match_head(self, node: ArgumentNode, offset: int) -> _NoMatch | None:
        """Try to consume one token for `node` itself.

        Returns None on success, or the (soft) reason it did not match.
        Unit and range errors on a numeric token are raised: the token was
        clearly meant for this slot.
        """
        if self._at_end():
            return self._no_match(ErrorKind.MISSING_ARGUMENTS, f"missing {node.label()}")

        token = self._tokens[self._pos]

        if node.is_keyword:
            if not token.matches_keyword(node.text):
                return self._no_match(ErrorKind.ARGUMENT_MISMATCH, f"expected {node.label()}, got '{token.text}'")
            value: Any = node.text

        elif node.kind is TokenKind.NUMBER:
            parsed = split_number(token.text) if token.is_number else None
            if parsed is None:
                return self._no_match(ErrorKind.TYPE_MISMATCH, f"expected a number for {node.label()}, got '{token.text}'")
            amount, suffix = parsed
            if not unit_accepts(node, suffix):
                raise self._no_match(ErrorKind.UNIT_MISMATCH, self._unit_message(node, suffix))
            value = self._check_range(node, amount)

        else:
            if token.is_number:
                return self._no_match(ErrorKind.TYPE_MISMATCH, f"expected a word for {node.label()}, got '{token.text}'")
            if node.choices is not None:
                if token.text.lower() not in node.choices:
                    options = ", ".join(sorted(node.choices))
                    return self._no_match(ErrorKind.ARGUMENT_MISMATCH, f"'{token.text}' is not one of: {options}")
                value = token.text.lower()
            else:
                value = token.text

        self._values[offset] = value
        self._pos += 1
        return None

    def _check_range(self, node: ArgumentNode, amount: float) -> float | int:
        if node.integer:
            if not amount.is_integer():
                raise self._no_match(ErrorKind.OUT_OF_RANGE, f"{node.label()} must be a whole number")
            amount = int(amount)
        if node.minimum is not None and amount < node.minimum:
            raise self._no_match(ErrorKind.OUT_OF_RANGE, f"{node.label()} must be at least {node.minimum:g}")
        if node.maximum is not None and amount > node.maximum:
            raise self._no_match(ErrorKind.OUT_OF_RANGE, f"{node.label()} must be at most {node.maximum:g}")
        return amount

    @staticmethod
    def _unit_message(node: ArgumentNode, suffix: str) -> str:
        unit = node.unit_name
        if not suffix:
            return f"missing unit '{unit}'"
        if unit is None:
            return f"unexpected unit '{suffix}'"
        return f"expected unit '{unit}', got '{suffix}'"

    # =========================================================================
    # Unordered grammars
    # =========================================================================

    def _match_unordered(self) -> None:
        schema = self._schema
        candidates: list[tuple[ArgumentNode, int]] = []
        offset = 0
        for node in schema.arguments:
            candidates.append((node, offset))
            offset += node.size

        used: set[int] = set()
        groups: dict[str, ArgumentNode] = {}

        while not self._at_end():
            token = self._tokens[self._pos]
            fitting = [(node, off) for node, off in candidates if self._fits(node, token)]

            if not fitting:
                if schema.allow_arbitrary_arguments:
                    self._extra.append(token)
                    self._pos += 1
                    continue
                raise self._no_match(ErrorKind.UNKNOWN_ARGUMENT, f"unknown argument '{token.text}' for '{schema.name}'")

            fresh = [(node, off) for node, off in fitting if off not in used]
            if not fresh:
                raise self._no_match(ErrorKind.DUPLICATE_ARGUMENT, f"{fitting[0][0].label()} given more than once")

            node, off = fresh[0]
            if node.group is not None and node.group in groups:
                raise self._no_match(
                    ErrorKind.CONFLICTING_ARGUMENTS,
                    f"{node.label()} conflicts with {groups[node.group].label()}",
                )

            self._match_node(node, off)
            used.add(off)
            if node.group is not None:
                groups[node.group] = node

        missing = [node.label() for node, off in candidates if node.required and off not in used]
        if missing:
            raise self._no_match(ErrorKind.MISSING_ARGUMENTS, f"missing {', '.join(missing)}")

    @staticmethod
    def _fits(node: ArgumentNode, token: Token) -> bool:
        """Whether `token` is shaped like an instance of `node`."""
        if node.is_keyword:
            return token.matches_keyword(node.text)
        if node.kind is TokenKind.NUMBER:
            if not token.is_number:
                return False
            parsed = split_number(token.text)
            return parsed is not None and unit_accepts(node, parsed[1])
        if token.is_number:
            return False
        return node.choices is None or token.text.lower() in node.choices

    # =========================================================================
    # Positions and results
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _no_match(self, kind: ErrorKind, message: str) -> _NoMatch:
        if self._at_end():
            span = self._end_span()
        else:
            span = self._tokens[self._pos].span
        return _NoMatch(kind, message, self._pos, span)

    def _end_span(self) -> SourceSpan | None:
        """Zero-width span just after the last token (or the tool name)."""
        last = self._tokens[-1] if self._tokens else self._name_token
        if last is None:
            return None
        return SourceSpan(line=last.line, start_col=last.end_col, end_col=last.end_col)

    def _full_span(self) -> SourceSpan | None:
        first = self._name_token or (self._tokens[0] if self._tokens else None)
        if first is None:
            return None
        last = self._tokens[-1] if self._tokens else first
        return SourceSpan.covering(first.span, last.span)

    def _failed(self, kind: ErrorKind, message: str, span: SourceSpan | None) -> MatchResult:
        logger.debug(f"Match failed | tool={self._schema.name} | {kind.value} | {message}")
        return MatchResult.fail(self._schema.name, kind, message, span, self._schema)
