"""Tests for the strict recursive descent parser."""

import pytest

from lollint.ast import (
    Assignment,
    BinaryExpression,
    BinaryOperator,
    BreakStatement,
    Conditional,
    Declaration,
    ExpressionStatement,
    InputStatement,
    Literal,
    LiteralKind,
    Loop,
    LoopPolarity,
    PrintStatement,
    StepOperation,
    UnaryExpression,
    VariableReference,
)
from lollint.errors import LolSyntaxError
from lollint.lang import LolParser, parse_source, tokenize
from lollint.lang.parser.parse import MAX_NESTING_DEPTH


def program_body(*lines):
    return parse_source("\n".join(["HAI 1.2", *lines, "KTHXBYE"])).statements


class TestProgramStructure:
    """HAI ... KTHXBYE framing."""

    def test_minimal_program(self):
        program = parse_source("HAI 1.2\nKTHXBYE\n")
        assert program.version == "1.2"
        assert program.statements == []
        assert (program.location.line, program.location.column) == (1, 1)

    def test_version_is_optional(self):
        assert parse_source("HAI\nKTHXBYE").version == "1.2"

    def test_leading_blank_lines_are_allowed(self):
        assert parse_source("\n\nHAI 1.2\nKTHXBYE").location.line == 3

    def test_missing_hai(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            parse_source("VISIBLE 1\nKTHXBYE")
        assert "must start with HAI" in exc_info.value.message

    def test_missing_kthxbye(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            parse_source("HAI 1.2\nVISIBLE 1\n")
        assert "HAI is never closed" in exc_info.value.message

    def test_content_after_kthxbye(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            parse_source("HAI 1.2\nKTHXBYE\nVISIBLE 1")
        assert exc_info.value.line == 3

    def test_parser_requires_eof_token(self):
        tokens = tokenize("HAI\nKTHXBYE")[:-1]
        with pytest.raises(ValueError):
            LolParser(tokens)


class TestStatements:
    """One production per statement form."""

    def test_declaration_with_and_without_initializer(self):
        first, second = program_body("I HAS A x", "I HAS A y ITZ 5")

        assert isinstance(first, Declaration)
        assert first.name == "x"
        assert first.initializer is None
        assert (first.location.line, first.location.column) == (2, 1)

        assert isinstance(second.initializer, Literal)
        assert second.initializer.value == 5

    def test_assignment(self):
        (statement,) = program_body("x R SUM OF x AN 1")

        assert isinstance(statement, Assignment)
        assert statement.target == "x"
        assert isinstance(statement.value, BinaryExpression)
        assert statement.value.operator is BinaryOperator.SUM

    def test_print_with_several_arguments_and_bang(self):
        (statement,) = program_body('VISIBLE "a" x 1!')

        assert isinstance(statement, PrintStatement)
        assert len(statement.expressions) == 3
        assert statement.suppress_newline is True

    def test_print_requires_an_expression(self):
        with pytest.raises(LolSyntaxError):
            program_body("VISIBLE")

    def test_input(self):
        (statement,) = program_body("GIMMEH answer")
        assert isinstance(statement, InputStatement)
        assert statement.target == "answer"

    def test_expression_statement(self):
        (statement,) = program_body("DIFFRINT x AN 2")
        assert isinstance(statement, ExpressionStatement)
        assert statement.expression.operator is BinaryOperator.DIFFRINT

    def test_comma_separates_statements(self):
        statements = program_body("I HAS A x ITZ 1, VISIBLE x")
        assert [type(s) for s in statements] == [Declaration, PrintStatement]

    def test_two_statements_on_one_line(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            program_body("I HAS A x ITZ 1 VISIBLE x")
        assert "end of line" in exc_info.value.message

    def test_stray_block_closer(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            program_body("OIC")
        assert "without a matching opener" in exc_info.value.message


class TestExpressions:
    """Prefix expressions with mandatory AN."""

    def test_nested_binary_expression(self):
        (statement,) = program_body("SUM OF PRODUKT OF 2 AN 3 AN x")
        expression = statement.expression

        assert expression.operator is BinaryOperator.SUM
        assert expression.left.operator is BinaryOperator.PRODUKT
        assert isinstance(expression.right, VariableReference)

    def test_missing_an_is_a_syntax_error(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            program_body("SUM OF 1 2")

        error = exc_info.value
        assert "Missing AN" in error.message
        assert (error.line, error.column) == (2, 10)
        assert error.expected == ["AN"]

    def test_not(self):
        (statement,) = program_body("NOT WIN")
        expression = statement.expression
        assert isinstance(expression, UnaryExpression)
        assert expression.operand.kind is LiteralKind.BOOLEAN
        assert expression.operand.value is True

    def test_literal_kinds(self):
        (statement,) = program_body('VISIBLE 1 2.5 "s" FAIL')
        values = [(e.kind, e.value) for e in statement.expressions]
        assert values == [
            (LiteralKind.NUMBER, 1),
            (LiteralKind.NUMBER, 2.5),
            (LiteralKind.STRING, "s"),
            (LiteralKind.BOOLEAN, False),
        ]

    def test_keyword_prefix_is_not_a_name(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            program_body("I HAS A BOTH")
        assert exc_info.value.suggestion == "Did you mean 'BOTH SAEM'?"

    def test_misspelled_keyword_gets_a_suggestion(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            program_body("SUM OF 1 ANN 2")
        assert exc_info.value.suggestion == "Did you mean 'AN'?"


class TestConditionals:
    """O RLY? blocks."""

    def test_full_conditional(self):
        statements = program_body(
            "BOTH SAEM x AN 1",
            "O RLY?",
            "  YA RLY",
            "    VISIBLE 1",
            "  MEBBE BOTH SAEM x AN 2",
            "    VISIBLE 2",
            "  NO WAI",
            "    VISIBLE 3",
            "OIC",
        )

        (conditional,) = statements
        assert isinstance(conditional, Conditional)
        assert conditional.condition.operator is BinaryOperator.BOTH_SAEM
        assert len(conditional.affirmative) == 1
        assert len(conditional.alternatives) == 1
        assert conditional.negative is not None and len(conditional.negative) == 1
        assert conditional.location.line == 3

    def test_without_preceding_expression_tests_it(self):
        (conditional,) = program_body("O RLY?", "YA RLY", "VISIBLE 1", "OIC")

        assert isinstance(conditional.condition, VariableReference)
        assert conditional.condition.name == "IT"
        assert conditional.condition.implicit is True
        assert conditional.negative is None

    def test_empty_negative_branch_is_kept(self):
        (conditional,) = program_body("WIN", "O RLY?", "YA RLY", "VISIBLE 1", "NO WAI", "OIC")
        assert conditional.negative == []

    def test_ya_rly_is_mandatory(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            program_body("WIN", "O RLY?", "NO WAI", "OIC")
        assert "YA RLY" in exc_info.value.message

    def test_unclosed_conditional(self):
        with pytest.raises(LolSyntaxError):
            program_body("WIN", "O RLY?", "YA RLY", "VISIBLE 1")


class TestLoops:
    """IM IN YR ... IM OUTTA YR blocks."""

    def test_loop_with_step_and_test(self):
        (loop,) = program_body(
            "IM IN YR counting UPPIN YR i TIL BOTH SAEM i AN 10",
            "  VISIBLE i",
            "IM OUTTA YR counting",
        )

        assert isinstance(loop, Loop)
        assert loop.label == "counting"
        assert loop.step.operation is StepOperation.UPPIN
        assert loop.step.variable == "i"
        assert loop.test.polarity is LoopPolarity.TIL
        assert len(loop.body) == 1

    def test_bare_loop_with_break(self):
        (loop,) = program_body("IM IN YR forever", "GTFO", "IM OUTTA YR forever")

        assert loop.step is None
        assert loop.test is None
        assert isinstance(loop.body[0], BreakStatement)

    def test_label_mismatch_is_fatal(self, label_mismatch_program):
        with pytest.raises(LolSyntaxError) as exc_info:
            parse_source(label_mismatch_program, path="loop.lol")

        error = exc_info.value
        assert "Loop label mismatch" in error.message
        assert "'outer'" in error.message and "'inner'" in error.message
        assert (error.line, error.column) == (5, 13)
        assert error.path == "loop.lol"

    def test_gtfo_outside_loop(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            program_body("GTFO")
        assert "outside of a loop" in exc_info.value.message

    def test_yr_is_required_after_uppin(self):
        with pytest.raises(LolSyntaxError):
            program_body("IM IN YR l UPPIN i", "VISIBLE i", "IM OUTTA YR l")


class TestNestingLimits:
    """Deeply nested input fails with a syntax error instead of crashing."""

    def test_moderate_expression_nesting_parses(self):
        (statement,) = program_body("VISIBLE " + "NOT " * 150 + "WIN")

        depth, expression = 0, statement.expressions[0]
        while isinstance(expression, UnaryExpression):
            depth, expression = depth + 1, expression.operand
        assert depth == 150

    def test_runaway_expression_nesting(self):
        with pytest.raises(LolSyntaxError) as exc_info:
            program_body("VISIBLE " + "NOT " * 3000 + "WIN")

        error = exc_info.value
        assert "nested too deeply" in error.message
        assert error.line == 2

    def test_runaway_block_nesting(self):
        depth = MAX_NESTING_DEPTH + 100
        opening = [f"IM IN YR l{n}" for n in range(depth)]
        closing = [f"IM OUTTA YR l{n}" for n in reversed(range(depth))]

        with pytest.raises(LolSyntaxError) as exc_info:
            program_body(*opening, "GTFO", *closing)
        assert "nested too deeply" in exc_info.value.message
