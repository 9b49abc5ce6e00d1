"""
Semantic linter for LOLCODE.

Walks a parsed program once, tracking nested scopes, and reports
semantic errors and code-quality warnings together with statistics.
"""

from __future__ import annotations

__all__ = [
    "SemanticLinter",
    "LintResult",
    "LintSeverity",
    "LintRule",
    "Diagnostic",
    "Statistics",
    "BUILTIN_RULES",
    "lint",
]

from .core import Diagnostic, LintResult, SemanticLinter, Statistics, lint
from .rules import BUILTIN_RULES, LintRule, LintSeverity
