"""Per-file analysis pipeline used by the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from rich.console import Console

from lollint.errors import LolLexError, LolSyntaxError
from lollint.lang import count_code_lines, parse, tokenize
from lollint.linter import LintResult, SemanticLinter

from .errors import EXIT_FATAL, EXIT_LINT_ERRORS, EXIT_OK, CLIFileError

logger = logging.getLogger(__name__)


@dataclass
class FileReport:
    """Outcome of analyzing one file: a lint result or a fatal failure."""

    path: str
    result: Optional[LintResult] = None
    fatal: Optional[Exception] = None
    # "read", "lex" or "syntax" when fatal is set
    stage: Optional[str] = None

    @property
    def exit_code(self) -> int:
        if self.fatal is not None:
            return EXIT_FATAL
        if self.result is not None and not self.result.success():
            return EXIT_LINT_ERRORS
        return EXIT_OK


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CLIFileError(
            f"{path} is not valid UTF-8 text",
            context={"path": str(path), "position": exc.start},
        ) from exc
    except OSError as exc:
        raise CLIFileError(
            f"cannot read {path}: {exc.strerror or exc}",
            context={"path": str(path)},
        ) from exc


def analyze_file(
    path: Path,
    linter: SemanticLinter,
    *,
    debug_console: Optional[Console] = None,
) -> FileReport:
    """
    Read, tokenize, parse and lint one file.

    Fatal failures are captured on the report instead of propagating so
    that the remaining files are still analyzed.
    """
    display = str(path)

    try:
        source = read_source(path)
    except CLIFileError as exc:
        logger.debug("Read failure for %s: %s", display, exc)
        return FileReport(path=display, fatal=exc, stage="read")

    try:
        tokens = tokenize(source, display)
    except LolLexError as exc:
        return FileReport(path=display, fatal=exc, stage="lex")

    if debug_console is not None:
        from .output import print_debug_tokens
        print_debug_tokens(display, tokens, debug_console)

    try:
        program = parse(tokens, path=display)
    except LolSyntaxError as exc:
        return FileReport(path=display, fatal=exc, stage="syntax")

    if debug_console is not None:
        from .output import print_debug_ast
        print_debug_ast(display, program, debug_console)

    result = linter.lint(program, lines_of_code=count_code_lines(tokens), path=display)
    return FileReport(path=display, result=result)


def analyze_files(
    paths: Iterable[Path],
    linter: SemanticLinter,
    *,
    debug_console: Optional[Console] = None,
) -> List[FileReport]:
    return [analyze_file(path, linter, debug_console=debug_console) for path in paths]


def overall_exit_code(reports: Iterable[FileReport]) -> int:
    """Worst per-file exit code; fatal failures win over lint errors."""
    return max((report.exit_code for report in reports), default=EXIT_OK)


__all__ = [
    "FileReport",
    "read_source",
    "analyze_file",
    "analyze_files",
    "overall_exit_code",
]
