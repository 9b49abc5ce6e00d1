"""Expression parsing methods for LolParser.

LOLCODE expressions are prefix notation.  Every binary operator requires
the explicit ``AN`` marker between its two operands; a missing marker is
a syntax error and is never inferred.

Grammar:
    Expression = BinaryOp , Expression , "AN" , Expression
               | "NOT" , Expression
               | NUMBER | STRING | BOOLEAN | IDENTIFIER ;
"""

from typing import Dict

from lollint.ast import (
    BinaryExpression,
    BinaryOperator,
    Expression,
    Literal,
    LiteralKind,
    UnaryExpression,
    UnaryOperator,
    VariableReference,
)
from ..keywords import BOOLEAN_LITERALS
from ..tokens import TokenType


class ExpressionParsingMixin:
    """Mixin with expression parsing methods."""

    _BINARY_OPERATORS: Dict[TokenType, BinaryOperator] = {
        TokenType.SUM_OF: BinaryOperator.SUM,
        TokenType.DIFF_OF: BinaryOperator.DIFF,
        TokenType.PRODUKT_OF: BinaryOperator.PRODUKT,
        TokenType.QUOSHUNT_OF: BinaryOperator.QUOSHUNT,
        TokenType.MOD_OF: BinaryOperator.MOD,
        TokenType.BIGGR_OF: BinaryOperator.BIGGR,
        TokenType.SMALLR_OF: BinaryOperator.SMALLR,
        TokenType.BOTH_SAEM: BinaryOperator.BOTH_SAEM,
        TokenType.DIFFRINT: BinaryOperator.DIFFRINT,
        TokenType.BOTH_OF: BinaryOperator.BOTH,
        TokenType.EITHER_OF: BinaryOperator.EITHER,
        TokenType.WON_OF: BinaryOperator.WON,
    }

    EXPRESSION_START = frozenset(
        set(_BINARY_OPERATORS)
        | {
            TokenType.NOT,
            TokenType.NUMBER,
            TokenType.STRING,
            TokenType.BOOLEAN,
            TokenType.IDENTIFIER,
        }
    )

    def parse_expression(self) -> Expression:
        """Parse a single (possibly nested) expression."""
        self.enter_nesting("Expression")
        try:
            return self._parse_expression()
        finally:
            self._nesting -= 1

    def _parse_expression(self) -> Expression:
        token = self.current()

        operator = self._BINARY_OPERATORS.get(token.type)
        if operator is not None:
            self.advance()
            left = self.parse_expression()
            self.expect(
                TokenType.AN,
                message=f"Missing AN between the operands of {operator.value}",
            )
            right = self.parse_expression()
            return BinaryExpression(
                operator=operator,
                left=left,
                right=right,
                location=self.location_of(token),
            )

        if token.type == TokenType.NOT:
            self.advance()
            operand = self.parse_expression()
            return UnaryExpression(
                operator=UnaryOperator.NOT,
                operand=operand,
                location=self.location_of(token),
            )

        if token.type == TokenType.NUMBER:
            self.advance()
            value = float(token.value) if "." in token.value else int(token.value)
            return Literal(
                kind=LiteralKind.NUMBER,
                value=value,
                raw=token.value,
                location=self.location_of(token),
            )

        if token.type == TokenType.STRING:
            self.advance()
            return Literal(
                kind=LiteralKind.STRING,
                value=token.value,
                raw=token.value,
                location=self.location_of(token),
            )

        if token.type == TokenType.BOOLEAN:
            self.advance()
            return Literal(
                kind=LiteralKind.BOOLEAN,
                value=BOOLEAN_LITERALS[token.value],
                raw=token.value,
                location=self.location_of(token),
            )

        if token.type == TokenType.IDENTIFIER:
            name_token = self.expect_identifier("in expression")
            return VariableReference(
                name=name_token.value,
                location=self.location_of(name_token),
            )

        raise self.error(
            "Expected an expression",
            token=token,
            expected=["expression"],
        )
