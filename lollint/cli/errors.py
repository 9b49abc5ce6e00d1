"""
Error handling and exit codes for the lollint CLI.

Lint errors found in a program are not exceptions; they only decide the
exit code.  The classes here cover the CLI's own failures: unreadable
files and invalid configuration.
"""

from typing import Any, Dict, Optional

from lollint.errors import LolError, LolLexError, LolSyntaxError


EXIT_OK = 0
EXIT_LINT_ERRORS = 1
EXIT_FATAL = 2


class CLIError(Exception):
    """
    Base exception for all CLI operations.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        hint: Optional suggestion for resolving the error
        context: Additional metadata about the error
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIConfigError(CLIError):
    """Configuration file is missing, unreadable or invalid."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_CONFIG_ERROR')
        super().__init__(message, **kwargs)


class CLIFileError(CLIError):
    """A source file given on the command line cannot be read."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_FILE_ERROR')
        super().__init__(message, **kwargs)


def failure_kind(exc: BaseException) -> str:
    """Short label for a fatal per-file failure."""
    if isinstance(exc, LolLexError):
        return "lexical error"
    if isinstance(exc, LolSyntaxError):
        return "syntax error"
    if isinstance(exc, CLIFileError):
        return "read error"
    return "error"


def format_cli_error(exc: BaseException) -> str:
    """
    Format exception for CLI display with location and hints.

    Examples:
        >>> print(format_cli_error(CLIConfigError("Bad scoping", hint="Use 'lexical' or 'flat'")))
        Error [CLI_CONFIG_ERROR]: Bad scoping
        Hint: Use 'lexical' or 'flat'
    """
    lines = []

    if isinstance(exc, LolError):
        location = exc.describe_location()
        prefix = f"{location}: " if location != "unknown location" else ""
        lines.append(f"{prefix}{failure_kind(exc)}: {exc.message}")
        suggestion = getattr(exc, "suggestion", None)
        if suggestion:
            lines.append(f"Hint: {suggestion}")
    elif isinstance(exc, CLIError):
        lines.append(f"Error [{exc.code}]: {exc.message}")
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
    else:
        lines.append(f"Error: {exc.__class__.__name__}: {exc}")

    return "\n".join(lines)


__all__ = [
    "EXIT_OK",
    "EXIT_LINT_ERRORS",
    "EXIT_FATAL",
    "CLIError",
    "CLIConfigError",
    "CLIFileError",
    "failure_kind",
    "format_cli_error",
]
