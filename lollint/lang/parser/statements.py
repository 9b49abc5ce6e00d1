"""Statement and block parsing methods for LolParser."""

from typing import FrozenSet, List

from lollint.ast import (
    Assignment,
    BreakStatement,
    Conditional,
    ConditionalBranch,
    Declaration,
    ExpressionStatement,
    InputStatement,
    Loop,
    LoopPolarity,
    LoopStep,
    LoopTest,
    PrintStatement,
    Statement,
    StepOperation,
    VariableReference,
)
from ..tokens import TokenType


_CONDITIONAL_ARM_END = frozenset({TokenType.MEBBE, TokenType.NO_WAI, TokenType.OIC})

# Tokens that close a block; seeing one where a statement should start
# means it has no matching opener.
_BLOCK_CLOSERS = frozenset({
    TokenType.YA_RLY,
    TokenType.MEBBE,
    TokenType.NO_WAI,
    TokenType.OIC,
    TokenType.IM_OUTTA_YR,
    TokenType.KTHXBYE,
})


class StatementParsingMixin:
    """Mixin with statement and block parsing methods."""

    def parse_block(self, terminators: FrozenSet[TokenType], opener: str) -> List[Statement]:
        """
        Parse statements until one of ``terminators`` is the current token.

        The terminator itself is left for the caller to consume.  Reaching
        end of file first is a syntax error naming the unclosed ``opener``.
        """
        self.enter_nesting("Block")
        try:
            return self._parse_block(terminators, opener)
        finally:
            self._nesting -= 1

    def _parse_block(self, terminators: FrozenSet[TokenType], opener: str) -> List[Statement]:
        statements: List[Statement] = []
        while True:
            self.skip_newlines()
            token = self.current()
            if token.type in terminators:
                return statements
            if token.type == TokenType.EOF:
                raise self.error(
                    f"Unexpected end of file: {opener} is never closed",
                    token=token,
                    expected=sorted(t.display for t in terminators),
                )
            if token.type == TokenType.O_RLY:
                statements.append(self.parse_conditional(statements))
            else:
                statements.append(self.parse_statement())

    def parse_statement(self) -> Statement:
        token = self.current()

        if token.type == TokenType.I_HAS_A:
            return self.parse_declaration()
        if token.type == TokenType.VISIBLE:
            return self.parse_print()
        if token.type == TokenType.GIMMEH:
            return self.parse_input()
        if token.type == TokenType.IM_IN_YR:
            return self.parse_loop()
        if token.type == TokenType.GTFO:
            return self.parse_break()
        if token.type == TokenType.IDENTIFIER and self.peek(1).type == TokenType.R:
            return self.parse_assignment()
        if token.type in self.EXPRESSION_START:
            expression = self.parse_expression()
            self.expect_end_of_statement()
            return ExpressionStatement(expression=expression, location=self.location_of(token))
        if token.type in _BLOCK_CLOSERS:
            raise self.error(f"Unexpected {token.type.display} without a matching opener", token=token)

        raise self.error("Expected a statement", token=token, expected=["statement"])

    def parse_declaration(self) -> Declaration:
        """I HAS A name [ITZ expression]"""
        start = self.advance()
        name = self.expect_identifier("after I HAS A")
        initializer = None
        if self.consume_if(TokenType.ITZ):
            initializer = self.parse_expression()
        self.expect_end_of_statement()
        return Declaration(
            name=name.value,
            location=self.location_of(start),
            initializer=initializer,
        )

    def parse_assignment(self) -> Assignment:
        """name R expression"""
        target = self.expect_identifier("as assignment target")
        self.expect(TokenType.R)
        value = self.parse_expression()
        self.expect_end_of_statement()
        return Assignment(target=target.value, value=value, location=self.location_of(target))

    def parse_print(self) -> PrintStatement:
        """VISIBLE expression [expression ...] [!]"""
        start = self.advance()
        expressions = []
        while not self.match(TokenType.NEWLINE, TokenType.EOF, TokenType.BANG):
            expressions.append(self.parse_expression())
        if not expressions:
            raise self.error("VISIBLE requires at least one expression", expected=["expression"])
        suppress_newline = self.consume_if(TokenType.BANG) is not None
        self.expect_end_of_statement()
        return PrintStatement(
            expressions=expressions,
            location=self.location_of(start),
            suppress_newline=suppress_newline,
        )

    def parse_input(self) -> InputStatement:
        """GIMMEH name"""
        start = self.advance()
        target = self.expect_identifier("after GIMMEH")
        self.expect_end_of_statement()
        return InputStatement(target=target.value, location=self.location_of(start))

    def parse_break(self) -> BreakStatement:
        start = self.current()
        if self._loop_depth == 0:
            raise self.error("GTFO outside of a loop", token=start)
        self.advance()
        self.expect_end_of_statement()
        return BreakStatement(location=self.location_of(start))

    def parse_conditional(self, preceding: List[Statement]) -> Conditional:
        """
        Parse an O RLY? block.

        Grammar:
            Conditional = [ Expression NEWLINE ] "O RLY?" NEWLINE
                          "YA RLY" NEWLINE { Statement }
                          { "MEBBE" Expression NEWLINE { Statement } }
                          [ "NO WAI" NEWLINE { Statement } ]
                          "OIC" ;

        The expression statement right before ``O RLY?`` is what the block
        tests, so it is taken out of ``preceding`` and becomes the
        condition.  Without one the block tests whatever IT holds.
        """
        start = self.advance()
        location = self.location_of(start)
        if preceding and isinstance(preceding[-1], ExpressionStatement):
            condition = preceding.pop().expression
        else:
            condition = VariableReference(name="IT", location=location, implicit=True)
        self.expect_end_of_statement()

        self.skip_newlines()
        self.expect(TokenType.YA_RLY, message="O RLY? must be followed by YA RLY")
        self.expect_end_of_statement()
        affirmative = self.parse_block(_CONDITIONAL_ARM_END, "O RLY?")

        alternatives = []
        while self.match(TokenType.MEBBE):
            mebbe = self.advance()
            branch_condition = self.parse_expression()
            self.expect_end_of_statement()
            body = self.parse_block(_CONDITIONAL_ARM_END, "O RLY?")
            alternatives.append(ConditionalBranch(
                condition=branch_condition,
                location=self.location_of(mebbe),
                body=body,
            ))

        negative = None
        if self.consume_if(TokenType.NO_WAI):
            self.expect_end_of_statement()
            negative = self.parse_block(frozenset({TokenType.OIC}), "O RLY?")

        self.expect(TokenType.OIC, message="O RLY? block must be closed with OIC")
        self.expect_end_of_statement()
        return Conditional(
            condition=condition,
            location=location,
            affirmative=affirmative,
            alternatives=alternatives,
            negative=negative,
        )

    def parse_loop(self) -> Loop:
        """
        Parse an IM IN YR block.

        Grammar:
            Loop = "IM IN YR" Label [ ( "UPPIN" | "NERFIN" ) "YR" Variable ]
                   [ ( "TIL" | "WILE" ) Expression ] NEWLINE
                   { Statement }
                   "IM OUTTA YR" Label ;
        """
        start = self.advance()
        label = self.expect_identifier("as loop label")

        step = None
        if self.match(TokenType.UPPIN, TokenType.NERFIN):
            operation = self.advance()
            self.expect(TokenType.YR, message=f"Expected YR after {operation.value}")
            variable = self.expect_identifier(f"after {operation.value} YR")
            step = LoopStep(
                operation=StepOperation(operation.value),
                variable=variable.value,
                location=self.location_of(variable),
            )

        test = None
        if self.match(TokenType.TIL, TokenType.WILE):
            polarity = self.advance()
            test = LoopTest(
                polarity=LoopPolarity(polarity.value),
                expression=self.parse_expression(),
            )
        self.expect_end_of_statement()

        self._loop_depth += 1
        body = self.parse_block(frozenset({TokenType.IM_OUTTA_YR}), f"loop '{label.value}'")
        self._loop_depth -= 1

        self.advance()
        closing = self.expect_identifier("after IM OUTTA YR")
        if closing.value != label.value:
            raise self.error(
                f"Loop label mismatch: opened as '{label.value}' but closed as '{closing.value}'",
                token=closing,
                expected=[label.value],
            )
        self.expect_end_of_statement()
        return Loop(
            label=label.value,
            location=self.location_of(start),
            step=step,
            test=test,
            body=body,
        )
