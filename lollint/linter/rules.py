"""Registry of the checks the semantic linter performs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class LintSeverity(Enum):
    """Severity levels for lint findings."""
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class LintRule:
    """A single check and the severity of what it reports."""

    rule_id: str
    severity: LintSeverity
    description: str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rule_id!r})"


UNDECLARED_VARIABLE = LintRule(
    "undeclared-variable",
    LintSeverity.ERROR,
    "A variable is referenced with no declaration in any enclosing scope",
)
UNDECLARED_ASSIGNMENT = LintRule(
    "undeclared-assignment",
    LintSeverity.ERROR,
    "A value is assigned (R or GIMMEH) to a variable that was never declared",
)
DOUBLE_DECLARATION = LintRule(
    "double-declaration",
    LintSeverity.ERROR,
    "A variable is declared twice in the same scope",
)
UNUSED_VARIABLE = LintRule(
    "unused-variable",
    LintSeverity.WARNING,
    "A variable is declared but never referenced",
)
CONSTANT_EXPRESSION = LintRule(
    "constant-expression",
    LintSeverity.WARNING,
    "BOTH SAEM or DIFFRINT compares two literals and always has the same result",
)
EMPTY_BLOCK = LintRule(
    "empty-block",
    LintSeverity.WARNING,
    "The YA RLY branch of a conditional has no statements",
)
MISSING_NEGATIVE_BRANCH = LintRule(
    "missing-negative-branch",
    LintSeverity.WARNING,
    "A conditional has no NO WAI branch",
)
EMPTY_LOOP_BODY = LintRule(
    "empty-loop-body",
    LintSeverity.WARNING,
    "A loop body has no statements",
)

BUILTIN_RULES: Dict[str, LintRule] = {
    rule.rule_id: rule
    for rule in (
        UNDECLARED_VARIABLE,
        UNDECLARED_ASSIGNMENT,
        DOUBLE_DECLARATION,
        UNUSED_VARIABLE,
        CONSTANT_EXPRESSION,
        EMPTY_BLOCK,
        MISSING_NEGATIVE_BRANCH,
        EMPTY_LOOP_BODY,
    )
}


def warning_rule_ids() -> List[str]:
    """Rule ids that may be disabled; errors can never be switched off."""
    return sorted(
        rule_id
        for rule_id, rule in BUILTIN_RULES.items()
        if rule.severity is LintSeverity.WARNING
    )
