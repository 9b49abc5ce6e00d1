"""Fatal error types raised by the tokenizer and the parser.

Only lexical and syntactic failures are exceptions.  Semantic findings
are collected by the linter as diagnostics and never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class LolError(Exception):
    """Base class for all fatal analysis errors."""

    message: str
    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
    code: str = "LOL_ERROR"

    def __str__(self) -> str:
        """Format error message with location."""
        parts = []

        if self.path:
            parts.append(f"File: {self.path}")

        if self.line is not None:
            if self.column is not None:
                parts.append(f"Line {self.line}:{self.column}")
            else:
                parts.append(f"Line {self.line}")

        parts.append(f"[{self.code}] {self.message}")

        return " | ".join(parts)

    def describe_location(self) -> str:
        if self.path and self.line is not None and self.column is not None:
            return f"{self.path}:{self.line}:{self.column}"
        if self.path and self.line is not None:
            return f"{self.path}:{self.line}"
        if self.path:
            return self.path
        return "unknown location"


@dataclass
class LolLexError(LolError):
    """Raised when source text cannot be tokenized."""

    code: str = "LEX_ERROR"

    @property
    def reason(self) -> str:
        return self.message


@dataclass
class LolSyntaxError(LolError):
    """Syntax error with detailed context."""

    expected: List[str] = field(default_factory=list)
    found: Optional[str] = None
    suggestion: Optional[str] = None
    code: str = "SYNTAX_ERROR"

    def __str__(self) -> str:
        """Format syntax error with expectations and suggestions."""
        base = super().__str__()
        details = []

        if self.expected:
            if len(self.expected) == 1:
                details.append(f"Expected: {self.expected[0]}")
            else:
                details.append(f"Expected one of: {', '.join(self.expected)}")

        if self.found:
            details.append(f"Found: {self.found}")

        if self.suggestion:
            details.append(f"Suggestion: {self.suggestion}")

        if details:
            return base + "\n  " + "\n  ".join(details)

        return base


def create_syntax_error(
    message: str,
    *,
    path: Optional[str] = None,
    line: Optional[int] = None,
    column: Optional[int] = None,
    expected: Optional[List[str]] = None,
    found: Optional[str] = None,
    suggestion: Optional[str] = None,
) -> LolSyntaxError:
    """Create a syntax error with context."""
    return LolSyntaxError(
        message=message,
        path=path,
        line=line,
        column=column,
        expected=expected or [],
        found=found,
        suggestion=suggestion,
    )


__all__ = [
    "LolError",
    "LolLexError",
    "LolSyntaxError",
    "create_syntax_error",
]
