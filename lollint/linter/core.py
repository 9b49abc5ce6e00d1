"""Core semantic linter infrastructure."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from lollint.ast import (
    Assignment,
    BinaryExpression,
    BinaryOperator,
    BreakStatement,
    Conditional,
    Declaration,
    Expression,
    ExpressionStatement,
    InputStatement,
    Literal,
    Loop,
    PrintStatement,
    Program,
    SourceLocation,
    Statement,
    UnaryExpression,
    VariableReference,
)
from lollint.lang import count_code_lines, parse, tokenize
from . import rules
from .rules import LintRule, LintSeverity
from .scope import ScopeStack

logger = logging.getLogger(__name__)

SCOPING_MODES = ("lexical", "flat")


@dataclass(frozen=True)
class Diagnostic:
    """A single lint finding."""
    severity: LintSeverity
    message: str
    line: int
    column: int
    rule_id: str

    @property
    def is_error(self) -> bool:
        return self.severity is LintSeverity.ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "rule": self.rule_id,
        }


@dataclass
class Statistics:
    """Code statistics gathered during the walk."""
    lines_of_code: int = 0
    variables: int = 0
    loops: int = 0
    conditionals: int = 0
    expressions: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class LintResult:
    """Result of semantic linting: errors first, then warnings, each by position."""
    diagnostics: List[Diagnostic]
    statistics: Statistics
    path: str = ""

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is LintSeverity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is LintSeverity.WARNING]

    def success(self) -> bool:
        """Check if linting completed without errors."""
        return self.error_count() == 0

    def has_issues(self) -> bool:
        return len(self.diagnostics) > 0

    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity is LintSeverity.ERROR)

    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity is LintSeverity.WARNING)


@dataclass
class LintContext:
    """Mutable state threaded through one walk; never shared between files."""
    scopes: ScopeStack
    statistics: Statistics
    disabled: frozenset = frozenset()
    findings: List[Diagnostic] = field(default_factory=list)

    def report(self, rule: LintRule, message: str, location: SourceLocation) -> None:
        if rule.rule_id in self.disabled:
            return
        self.findings.append(Diagnostic(
            severity=rule.severity,
            message=message,
            line=location.line,
            column=location.column,
            rule_id=rule.rule_id,
        ))


def order_diagnostics(findings: Iterable[Diagnostic]) -> List[Diagnostic]:
    """All errors by (line, column), then all warnings by (line, column)."""
    findings = list(findings)

    def position(diagnostic: Diagnostic):
        return diagnostic.line, diagnostic.column

    errors = sorted((d for d in findings if d.is_error), key=position)
    warnings = sorted((d for d in findings if not d.is_error), key=position)
    return errors + warnings


class SemanticLinter:
    """
    Semantic and quality linter for LOLCODE programs.

    Performs one depth-first walk of the AST with a scope stack that
    mirrors block nesting, reporting:
    - Undeclared variables and assignment targets (errors)
    - Double declarations within one scope (errors)
    - Unused variables, constant comparisons, empty YA RLY branches,
      missing NO WAI branches and empty loop bodies (warnings)

    Linting never raises for problems in the program; every finding is
    returned as a ``Diagnostic``.
    """

    def __init__(self, *, scoping: str = "lexical", disabled_rules: Iterable[str] = ()):
        if scoping not in SCOPING_MODES:
            raise ValueError(f"Unknown scoping mode {scoping!r}; expected one of {SCOPING_MODES}")
        self.scoping = scoping
        self.disabled_rules = frozenset(disabled_rules)

    def lint_document(self, source_text: str, file_path: str = "") -> LintResult:
        """
        Tokenize, parse and lint a LOLCODE document.

        Args:
            source_text: Source code to analyze
            file_path: File path for error reporting

        Returns:
            LintResult with ordered diagnostics and statistics

        Raises:
            LolLexError: If the source cannot be tokenized
            LolSyntaxError: On the first grammar violation
        """
        tokens = tokenize(source_text, file_path)
        program = parse(tokens, path=file_path)
        return self.lint(program, lines_of_code=count_code_lines(tokens), path=file_path)

    def lint(self, program: Program, *, lines_of_code: int = 0, path: str = "") -> LintResult:
        context = LintContext(
            scopes=ScopeStack(flat=self.scoping == "flat"),
            statistics=Statistics(lines_of_code=lines_of_code),
            disabled=self.disabled_rules,
        )
        self._check_block(program.statements, context)

        diagnostics = order_diagnostics(context.findings)
        result = LintResult(diagnostics=diagnostics, statistics=context.statistics, path=path)
        logger.debug(
            "Linted %s: %d errors, %d warnings",
            path or "<program>",
            result.error_count(),
            result.warning_count(),
        )
        return result

    # ------------------------------------------------------------------
    # Blocks and statements
    # ------------------------------------------------------------------

    def _check_block(self, statements: List[Statement], context: LintContext) -> None:
        context.scopes.push()
        self._check_statements(statements, context)
        self._close_scope(context)

    def _check_statements(self, statements: List[Statement], context: LintContext) -> None:
        for statement in statements:
            self._check_statement(statement, context)

    def _close_scope(self, context: LintContext) -> None:
        for symbol in context.scopes.pop():
            if not symbol.used:
                context.report(
                    rules.UNUSED_VARIABLE,
                    f"unused variable '{symbol.name}'",
                    symbol.location,
                )

    def _check_statement(self, statement: Statement, context: LintContext) -> None:
        if isinstance(statement, Declaration):
            if statement.initializer is not None:
                self._check_expression(statement.initializer, context)
            if context.scopes.declare(statement.name, statement.location):
                context.statistics.variables += 1
            else:
                context.report(
                    rules.DOUBLE_DECLARATION,
                    f"double declaration '{statement.name}'",
                    statement.location,
                )

        elif isinstance(statement, Assignment):
            self._check_assignment_target(statement.target, statement.location, context)
            self._check_expression(statement.value, context)

        elif isinstance(statement, InputStatement):
            self._check_assignment_target(statement.target, statement.location, context)

        elif isinstance(statement, PrintStatement):
            for expression in statement.expressions:
                self._check_expression(expression, context)

        elif isinstance(statement, ExpressionStatement):
            self._check_expression(statement.expression, context)

        elif isinstance(statement, Conditional):
            self._check_conditional(statement, context)

        elif isinstance(statement, Loop):
            self._check_loop(statement, context)

        elif isinstance(statement, BreakStatement):
            pass

        else:
            raise TypeError(f"Unknown statement node: {type(statement).__name__}")

    def _check_assignment_target(self, name: str, location: SourceLocation, context: LintContext) -> None:
        if not context.scopes.use(name):
            context.report(
                rules.UNDECLARED_ASSIGNMENT,
                f"assignment to undeclared variable '{name}'",
                location,
            )

    def _check_conditional(self, conditional: Conditional, context: LintContext) -> None:
        context.statistics.conditionals += 1
        self._check_expression(conditional.condition, context)

        if not conditional.affirmative:
            context.report(rules.EMPTY_BLOCK, "empty block in YA RLY branch", conditional.location)
        self._check_block(conditional.affirmative, context)

        for branch in conditional.alternatives:
            self._check_expression(branch.condition, context)
            self._check_block(branch.body, context)

        if conditional.negative is None:
            context.report(
                rules.MISSING_NEGATIVE_BRANCH,
                "missing negative branch: O RLY? without NO WAI",
                conditional.location,
            )
        else:
            self._check_block(conditional.negative, context)

    def _check_loop(self, loop: Loop, context: LintContext) -> None:
        context.statistics.loops += 1
        context.scopes.push(isolated=True)

        if loop.step is not None and not context.scopes.use(loop.step.variable):
            context.scopes.declare(loop.step.variable, loop.step.location, implicit=True)
        if loop.test is not None:
            self._check_expression(loop.test.expression, context)

        if not loop.body:
            context.report(rules.EMPTY_LOOP_BODY, f"empty loop body in loop '{loop.label}'", loop.location)
        self._check_statements(loop.body, context)
        self._close_scope(context)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _check_expression(self, expression: Expression, context: LintContext) -> None:
        if isinstance(expression, VariableReference):
            if not context.scopes.use(expression.name):
                context.report(
                    rules.UNDECLARED_VARIABLE,
                    f"undeclared variable '{expression.name}'",
                    expression.location,
                )

        elif isinstance(expression, Literal):
            pass

        elif isinstance(expression, BinaryExpression):
            context.statistics.expressions += 1
            self._check_expression(expression.left, context)
            self._check_expression(expression.right, context)
            outcome = constant_comparison(expression)
            if outcome is not None:
                context.report(
                    rules.CONSTANT_EXPRESSION,
                    f"constant expression always {'true' if outcome else 'false'}",
                    expression.location,
                )

        elif isinstance(expression, UnaryExpression):
            context.statistics.expressions += 1
            self._check_expression(expression.operand, context)

        else:
            raise TypeError(f"Unknown expression node: {type(expression).__name__}")


def constant_comparison(expression: BinaryExpression) -> Optional[bool]:
    """
    Result of a BOTH SAEM / DIFFRINT between two same-kind literals.

    Returns ``None`` when the comparison depends on program state.
    Numbers compare numerically, so ``5`` and ``5.0`` are the same.
    """
    if not expression.operator.is_comparison:
        return None
    left, right = expression.left, expression.right
    if not (isinstance(left, Literal) and isinstance(right, Literal)):
        return None
    if left.kind is not right.kind:
        return None
    same = left.value == right.value
    return same if expression.operator is BinaryOperator.BOTH_SAEM else not same


def lint(program: Program, *, lines_of_code: int = 0, scoping: str = "lexical") -> LintResult:
    """Lint an already parsed program with default settings."""
    return SemanticLinter(scoping=scoping).lint(program, lines_of_code=lines_of_code)


__all__ = [
    "Diagnostic",
    "Statistics",
    "LintResult",
    "LintContext",
    "SemanticLinter",
    "order_diagnostics",
    "constant_comparison",
    "lint",
    "SCOPING_MODES",
]
