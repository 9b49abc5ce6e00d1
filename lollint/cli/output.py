"""
Output formatting for lint runs.

Human output is rendered with ``rich``; machine output is a single JSON
document printed once every file has been processed.
"""

import json
from typing import Any, Dict, List, Sequence

from rich.console import Console
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from lollint.ast import Program
from lollint.errors import LolError
from lollint.lang import Token
from lollint.linter import Diagnostic, LintSeverity, Statistics

from .errors import failure_kind, format_cli_error
from .report import FileReport

SEVERITY_STYLES = {
    LintSeverity.ERROR: "bold red",
    LintSeverity.WARNING: "yellow",
}

STAT_LABELS = (
    ("lines_of_code", "Lines of code"),
    ("variables", "Variables"),
    ("loops", "Loops"),
    ("conditionals", "Conditionals"),
    ("expressions", "Expressions"),
)


def make_console(*, color: bool = True, stderr: bool = False) -> Console:
    return Console(
        stderr=stderr,
        no_color=not color,
        highlight=False,
        soft_wrap=True,
    )


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def format_diagnostic(path: str, diagnostic: Diagnostic) -> Text:
    """``path:line:column: severity: message [rule_id]``"""
    text = Text(f"{path}:{diagnostic.line}:{diagnostic.column}: ")
    text.append(diagnostic.severity.value, style=SEVERITY_STYLES[diagnostic.severity])
    text.append(f": {diagnostic.message} ")
    text.append(f"[{diagnostic.rule_id}]", style="dim")
    return text


def format_fatal(report: FileReport) -> Text:
    exc = report.fatal
    if isinstance(exc, LolError) and exc.path:
        return Text(format_cli_error(exc), style="bold red")
    return Text(f"{report.path}: {failure_kind(exc)}: {exc}", style="bold red")


def stats_table(statistics: Statistics, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Metric", style="bold blue")
    table.add_column("Count", justify="right", style="green")
    values = statistics.to_dict()
    for key, label in STAT_LABELS:
        table.add_row(label, str(values[key]))
    return table


def print_human_report(
    reports: Sequence[FileReport],
    *,
    console: Console,
    err_console: Console,
    show_stats: bool = False,
) -> None:
    """Print diagnostics, fatal failures, statistics and a summary line."""
    total_errors = 0
    total_warnings = 0

    for report in reports:
        if report.fatal is not None:
            err_console.print(format_fatal(report))
            continue
        result = report.result
        for diagnostic in result.diagnostics:
            console.print(format_diagnostic(report.path, diagnostic))
        total_errors += result.error_count()
        total_warnings += result.warning_count()
        if show_stats:
            console.print(stats_table(result.statistics, f"Statistics for {report.path}"))

    fatal_count = sum(1 for report in reports if report.fatal is not None)
    if total_errors or total_warnings:
        console.print(Text(
            f"{_plural(total_errors, 'error')}, {_plural(total_warnings, 'warning')}",
            style="bold red" if total_errors else "yellow",
        ))
    elif not fatal_count:
        console.print(Text("✓ No linting issues found", style="green"))

    if fatal_count:
        err_console.print(Text(
            f"✗ {_plural(fatal_count, 'file')} could not be analyzed",
            style="bold red",
        ))


def _fatal_dict(report: FileReport) -> Dict[str, Any]:
    exc = report.fatal
    payload: Dict[str, Any] = {
        "kind": report.stage,
        "message": getattr(exc, "message", str(exc)),
        "line": getattr(exc, "line", None),
        "column": getattr(exc, "column", None),
    }
    suggestion = getattr(exc, "suggestion", None)
    if suggestion:
        payload["suggestion"] = suggestion
    return payload


def build_json_document(reports: Sequence[FileReport]) -> Dict[str, Any]:
    files: List[Dict[str, Any]] = []
    total_errors = 0
    total_warnings = 0

    for report in reports:
        if report.fatal is not None:
            files.append({
                "file": report.path,
                "status": "fatal",
                "errors": [],
                "warnings": [],
                "stats": None,
                "fatal": _fatal_dict(report),
            })
            continue
        result = report.result
        total_errors += result.error_count()
        total_warnings += result.warning_count()
        files.append({
            "file": report.path,
            "status": "ok" if result.success() else "errors",
            "errors": [d.to_dict() for d in result.errors],
            "warnings": [d.to_dict() for d in result.warnings],
            "stats": result.statistics.to_dict(),
            "fatal": None,
        })

    return {"files": files, "errors": total_errors, "warnings": total_warnings}


def print_json_report(reports: Sequence[FileReport]) -> None:
    print(json.dumps(build_json_document(reports), indent=2))


def print_debug_tokens(path: str, tokens: Sequence[Token], console: Console) -> None:
    console.rule(Text(f"Tokens: {path}"))
    for token in tokens:
        console.print(Text(repr(token)))


def print_debug_ast(path: str, program: Program, console: Console) -> None:
    console.rule(Text(f"AST: {path}"))
    console.print(Pretty(program, expand_all=True))


__all__ = [
    "make_console",
    "format_diagnostic",
    "stats_table",
    "print_human_report",
    "build_json_document",
    "print_json_report",
    "print_debug_tokens",
    "print_debug_ast",
]
