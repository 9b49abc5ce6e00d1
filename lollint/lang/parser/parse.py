"""Strict recursive descent parser for LOLCODE.

Each statement form and each expression form corresponds to one grammar
production.  Parsing is fail-fast: the first violation raises a
``LolSyntaxError`` and no partial tree is returned.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from lollint.ast import Program, SourceLocation
from lollint.errors import LolSyntaxError, create_syntax_error
from ..keywords import COMPOUND_PREFIXES, LANGUAGE_VERSION, suggest_keyword
from ..tokens import Token, TokenType
from .expressions import ExpressionParsingMixin
from .statements import StatementParsingMixin

logger = logging.getLogger(__name__)

# Nested blocks and expressions counted together.
MAX_NESTING_DEPTH = 200


class LolParser(StatementParsingMixin, ExpressionParsingMixin):
    """
    Recursive descent parser producing a ``Program`` from a token list.

    The token list must end with an EOF token, as produced by
    ``lollint.lang.lexer.tokenize``.
    """

    def __init__(self, tokens: Sequence[Token], *, path: str = ""):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token stream must be terminated by an EOF token")
        self.tokens: List[Token] = list(tokens)
        self.path = path
        self.pos = 0
        self._loop_depth = 0
        self._nesting = 0

    # ====================================================================
    # Token Management
    # ====================================================================

    def peek(self, offset: int = 0) -> Token:
        """Peek at token without consuming; clamps to the EOF token."""
        pos = min(self.pos + offset, len(self.tokens) - 1)
        return self.tokens[pos]

    def current(self) -> Token:
        return self.peek(0)

    def advance(self) -> Token:
        """Consume and return current token; never moves past EOF."""
        token = self.current()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        return self.current().type in types

    def consume_if(self, *types: TokenType) -> Optional[Token]:
        if self.match(*types):
            return self.advance()
        return None

    def expect(self, *types: TokenType, message: Optional[str] = None) -> Token:
        """Expect one of the given token types and consume it."""
        token = self.current()
        if token.type not in types:
            raise self.error(
                message or f"Expected {' or '.join(t.display for t in types)}",
                token=token,
                expected=[t.display for t in types],
                suggestion=self._suggest_token_fix(token),
            )
        return self.advance()

    def expect_identifier(self, context: str) -> Token:
        """Expect a variable or label name."""
        token = self.current()
        if token.type != TokenType.IDENTIFIER:
            raise self.error(
                f"Expected identifier {context}",
                token=token,
                expected=["identifier"],
            )
        if token.value in COMPOUND_PREFIXES:
            raise self.error(
                f"'{token.value}' starts a keyword phrase and cannot be used as a name",
                token=token,
                suggestion=self._suggest_token_fix(token),
            )
        return self.advance()

    def expect_end_of_statement(self) -> None:
        """A statement ends at a newline (or comma) or at end of file."""
        if self.match(TokenType.EOF):
            return
        self.expect(TokenType.NEWLINE, message="Expected end of line after statement")

    def skip_newlines(self) -> None:
        while self.match(TokenType.NEWLINE):
            self.advance()

    def enter_nesting(self, what: str) -> None:
        """Count one more level of block or expression nesting."""
        if self._nesting >= MAX_NESTING_DEPTH:
            raise self.error(f"{what} nested too deeply (more than {MAX_NESTING_DEPTH} levels)")
        self._nesting += 1

    def location_of(self, token: Token) -> SourceLocation:
        return SourceLocation(line=token.line, column=token.column, file=self.path)

    def error(
        self,
        message: str,
        *,
        token: Optional[Token] = None,
        expected: Optional[List[str]] = None,
        suggestion: Optional[str] = None,
    ) -> LolSyntaxError:
        """Create a syntax error at ``token`` (default: current token)."""
        token = token or self.current()
        return create_syntax_error(
            message,
            path=self.path or None,
            line=token.line,
            column=token.column,
            expected=expected,
            found=token.describe(),
            suggestion=suggestion,
        )

    def _suggest_token_fix(self, token: Token) -> Optional[str]:
        """Suggest a keyword when a stray word looks like a misspelled one."""
        if token.type != TokenType.IDENTIFIER:
            return None
        keyword = suggest_keyword(token.value)
        if keyword:
            return f"Did you mean '{keyword}'?"
        return None

    # ====================================================================
    # Program
    # ====================================================================

    def parse(self) -> Program:
        """
        Parse a whole program.

        Grammar:
            Program = "HAI" [ NUMBER ] NEWLINE { Statement } "KTHXBYE" ;
        """
        self.skip_newlines()
        start = self.expect(TokenType.HAI, message="Program must start with HAI")
        version = LANGUAGE_VERSION
        version_token = self.consume_if(TokenType.NUMBER)
        if version_token is not None:
            version = version_token.value
        self.expect_end_of_statement()

        try:
            statements = self.parse_block(frozenset({TokenType.KTHXBYE}), "HAI")
        except RecursionError:
            raise self.error("Expression nested too deeply", token=start) from None
        self.advance()
        self.expect_end_of_statement()

        self.skip_newlines()
        if not self.match(TokenType.EOF):
            raise self.error("Unexpected content after KTHXBYE", expected=["end of file"])

        logger.debug(
            "Parsed %s: %d top-level statements",
            self.path or "<source>",
            len(statements),
        )
        return Program(
            location=self.location_of(start),
            version=version,
            statements=statements,
        )


__all__ = ["LolParser", "MAX_NESTING_DEPTH"]
