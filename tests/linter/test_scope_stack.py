"""Tests for the scope stack and the rule registry."""

import pytest

from lollint.ast import SourceLocation
from lollint.linter import BUILTIN_RULES, LintSeverity
from lollint.linter.rules import warning_rule_ids
from lollint.linter.scope import ScopeStack


def at(line, column=1):
    return SourceLocation(line=line, column=column)


class TestScopeStack:
    """Innermost-first lookup with push/pop mirroring block nesting."""

    def test_declare_and_use(self):
        scopes = ScopeStack()
        scopes.push()

        assert scopes.declare("x", at(1))
        assert scopes.use("x")
        (symbol,) = scopes.pop()
        assert symbol.name == "x"
        assert symbol.used is True

    def test_redeclaring_in_same_frame_fails(self):
        scopes = ScopeStack()
        scopes.push()
        assert scopes.declare("x", at(1))
        assert not scopes.declare("x", at(2))
        assert scopes.lookup("x").location.line == 1

    def test_lookup_scans_outwards(self):
        scopes = ScopeStack()
        scopes.push()
        scopes.declare("outer", at(1))
        scopes.push()

        assert scopes.use("outer")
        assert scopes.pop() == []
        assert scopes.lookup("outer").used is True

    def test_inner_frame_shadows(self):
        scopes = ScopeStack()
        scopes.push()
        scopes.declare("x", at(1))
        scopes.push()
        assert scopes.declare("x", at(2))

        scopes.use("x")
        (inner,) = scopes.pop()
        (outer,) = scopes.pop()
        assert inner.used is True
        assert outer.used is False

    def test_popped_symbols_keep_declaration_order(self):
        scopes = ScopeStack()
        scopes.push()
        for index, name in enumerate(["c", "a", "b"], start=1):
            scopes.declare(name, at(index))
        assert [s.name for s in scopes.pop()] == ["c", "a", "b"]

    def test_builtins_resolve_without_declaration(self):
        scopes = ScopeStack()
        scopes.push()
        assert scopes.use("IT")
        assert not scopes.use("missing")
        assert scopes.lookup("IT") is None

    def test_implicit_symbols_count_as_used(self):
        scopes = ScopeStack()
        scopes.push()
        scopes.declare("i", at(1), implicit=True)
        (symbol,) = scopes.pop()
        assert symbol.implicit and symbol.used

    def test_flat_mode_shares_one_frame(self):
        scopes = ScopeStack(flat=True)
        scopes.push()
        scopes.declare("x", at(1))
        scopes.push()

        assert scopes.depth == 2
        assert not scopes.declare("x", at(2))
        assert scopes.pop() == []
        assert [s.name for s in scopes.pop()] == ["x"]
        assert scopes.depth == 0

    def test_flat_mode_isolated_frame_holds_only_implicit_symbols(self):
        scopes = ScopeStack(flat=True)
        scopes.push()
        scopes.push(isolated=True)
        scopes.declare("i", at(2), implicit=True)
        scopes.declare("total", at(3))

        assert scopes.use("i")
        (temporary,) = scopes.pop()
        assert temporary.name == "i"
        assert not scopes.use("i")
        assert scopes.declare("i", at(5))
        assert [s.name for s in scopes.pop()] == ["total", "i"]

    def test_pop_empty_stack(self):
        with pytest.raises(IndexError):
            ScopeStack().pop()


class TestRuleRegistry:
    """Rule ids and severities."""

    def test_error_rules(self):
        errors = sorted(r for r, rule in BUILTIN_RULES.items() if rule.severity is LintSeverity.ERROR)
        assert errors == ["double-declaration", "undeclared-assignment", "undeclared-variable"]

    def test_only_warnings_can_be_disabled(self):
        assert warning_rule_ids() == [
            "constant-expression",
            "empty-block",
            "empty-loop-body",
            "missing-negative-branch",
            "unused-variable",
        ]
