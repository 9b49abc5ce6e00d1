"""Source location information for AST nodes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code.

    Every AST node carries one so diagnostics can point at the exact
    line and column the construct started on.
    """
    line: int
    column: int
    file: str = ""

    def __str__(self) -> str:
        """Return human-readable location string."""
        if self.file:
            return f"{self.file}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


__all__ = ["SourceLocation"]
