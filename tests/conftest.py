"""Shared pytest fixtures for tastools tests."""

import re
import tempfile
from pathlib import Path
from typing import Callable

import pytest

from tastools.config import ScriptConfig
from tastools.domain import MatchResult, Token, TokenKind
from tastools.runtime import ScriptSession, match
from tastools.services import ActiveToolTracker, CheckCoordinator, ReplayBudget, TOOL_REGISTRY

# Stand-in for the external tokenizer: numbers start with a digit, sign or ".5"
_NUMERIC_START = re.compile(r"^[+-]?(\d|\.\d)")


def split_line(text: str, line: int = 0) -> list[Token]:
    """Split a script line on whitespace into positioned tokens."""
    tokens = []
    for m in re.finditer(r"\S+", text):
        word = m.group()
        kind = TokenKind.NUMBER if _NUMERIC_START.match(word) else TokenKind.STRING
        tokens.append(Token(kind=kind, text=word, line=line, start_col=m.start(), end_col=m.end()))
    return tokens


# =============================================================================
# Tokens and matching
# =============================================================================

@pytest.fixture
def tokenize() -> Callable[..., list[Token]]:
    """Turn a script line into tokens."""
    return split_line


@pytest.fixture
def match_line() -> Callable[[str], MatchResult]:
    """Match a whole invocation line ("duck 20") against the catalogue."""
    def _match(text: str) -> MatchResult:
        tokens = split_line(text)
        schema = TOOL_REGISTRY.lookup(tokens[0].text)
        assert schema is not None, f"no such tool in line: {text}"
        return match(schema, tokens[1:], tokens[0])
    return _match


# =============================================================================
# Services
# =============================================================================

@pytest.fixture
def config() -> ScriptConfig:
    """Default script configuration."""
    return ScriptConfig()


@pytest.fixture
def tracker() -> ActiveToolTracker:
    """An empty active tool tracker."""
    return ActiveToolTracker()


@pytest.fixture
def coordinator(config: ScriptConfig) -> CheckCoordinator:
    """A check coordinator with the default replay budget."""
    return CheckCoordinator(ReplayBudget(config.check_max_replays), config)


@pytest.fixture
def session() -> ScriptSession:
    """A fresh script session over the standard catalogue."""
    return ScriptSession()


@pytest.fixture
def run_line(session: ScriptSession) -> Callable[[str, int], MatchResult]:
    """Invoke a line on the session fixture at a tick."""
    def _run(text: str, tick: int = 0) -> MatchResult:
        return session.invoke(split_line(text), tick)
    return _run


# =============================================================================
# Files
# =============================================================================

@pytest.fixture
def temp_log_dir() -> Path:
    """Create a temporary directory for log files."""
    with tempfile.TemporaryDirectory(prefix="tastools_test_") as tmpdir:
        yield Path(tmpdir)
