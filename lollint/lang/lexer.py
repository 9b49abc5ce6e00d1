"""Lexical analyzer (tokenizer) for LOLCODE.

Converts source text into a stream of tokens for parsing.  Comments are
stripped here, compound keyword phrases are folded into single tokens and
every token records the 1-based line and column of its first character.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from ..errors import LolLexError
from .keywords import (
    BLOCK_COMMENT_END,
    BLOCK_COMMENT_START,
    BOOLEAN_LITERALS,
    COMPOUND_KEYWORDS,
    COMPOUND_PREFIXES,
    LINE_COMMENT,
    SINGLE_KEYWORDS,
)
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


_STRING_ESCAPES = {
    ")": "\n",
    ">": "\t",
    "o": "\a",
    '"': '"',
    ":": ":",
}

# NUMBR and NUMBAR literals are ASCII only
_DIGITS = frozenset("0123456789")


def _is_digit(char: Optional[str]) -> bool:
    return char is not None and char in _DIGITS


class Lexer:
    """Tokenizer for LOLCODE source code."""

    def __init__(self, source: str, path: str = ""):
        self.source = source
        self.path = path
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def error(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> LolLexError:
        """Create a lexer error, by default at the current position."""
        return LolLexError(
            message=message,
            path=self.path or None,
            line=self.line if line is None else line,
            column=self.column if column is None else column,
        )

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character without consuming."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return current character."""
        if self.pos >= len(self.source):
            return None

        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def _mark(self) -> Tuple[int, int, int]:
        return self.pos, self.line, self.column

    def _reset(self, mark: Tuple[int, int, int]) -> None:
        self.pos, self.line, self.column = mark

    def add_token(self, token_type: TokenType, value: str, line: int, column: int) -> None:
        self.tokens.append(Token(type=token_type, value=value, line=line, column=column))

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    def read_word(self) -> str:
        """Read an identifier or keyword word."""
        chars = []
        while self.peek() is not None and (self.peek().isalnum() or self.peek() == "_"):
            chars.append(self.advance())
        word = "".join(chars)
        # `?` only ever belongs to the O RLY? phrase
        if word == "RLY" and self.peek() == "?":
            word += self.advance()
        return word

    def read_string(self) -> str:
        """Read a double quoted string literal, resolving `:` escapes."""
        line, column = self.line, self.column
        self.advance()  # opening quote
        chars = []

        while True:
            char = self.peek()
            if char is None or char == "\n":
                raise self.error("Unterminated string literal", line, column)
            if char == '"':
                self.advance()
                break
            if char == ":" and self.peek(1) in _STRING_ESCAPES:
                self.advance()
                chars.append(_STRING_ESCAPES[self.advance()])
                continue
            chars.append(self.advance())

        return "".join(chars)

    def read_number(self) -> str:
        """Read a NUMBR or NUMBAR literal."""
        chars = []

        if self.peek() == "-":
            chars.append(self.advance())

        while _is_digit(self.peek()):
            chars.append(self.advance())

        if self.peek() == "." and _is_digit(self.peek(1)):
            chars.append(self.advance())
            while _is_digit(self.peek()):
                chars.append(self.advance())

        return "".join(chars)

    def skip_line_comment(self) -> None:
        """Skip a BTW comment up to (not including) the end of line."""
        while self.peek() is not None and self.peek() != "\n":
            self.advance()

    def skip_block_comment(self, line: int, column: int) -> None:
        """Skip an OBTW ... TLDR comment, which may span several lines."""
        previous = " "
        while True:
            char = self.peek()
            if char is None:
                raise self.error("Unterminated block comment (OBTW without TLDR)", line, column)
            if char.isalpha() and not (previous.isalnum() or previous == "_"):
                word = self.read_word()
                if word.upper() == BLOCK_COMMENT_END:
                    return
                previous = word[-1]
                continue
            previous = self.advance()

    def match_phrase(self, phrase: Tuple[str, ...]) -> bool:
        """
        Try to consume the remaining words of a compound phrase.

        The first word has already been read.  Words must be separated by
        spaces or tabs; on mismatch the position is restored.
        """
        mark = self._mark()
        for expected in phrase[1:]:
            if self.peek() not in (" ", "\t"):
                self._reset(mark)
                return False
            while self.peek() in (" ", "\t"):
                self.advance()
            if self.read_word() != expected:
                self._reset(mark)
                return False
        return True

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source."""
        while self.pos < len(self.source):
            char = self.peek()
            line, column = self.line, self.column

            if char in (" ", "\t", "\r"):
                self.advance()
                continue

            if char == "\n" or char == ",":
                self.add_token(TokenType.NEWLINE, char, line, column)
                self.advance()
                continue

            if char == "!":
                self.add_token(TokenType.BANG, char, line, column)
                self.advance()
                continue

            if char == '"':
                value = self.read_string()
                self.add_token(TokenType.STRING, value, line, column)
                continue

            if _is_digit(char) or (char == "-" and _is_digit(self.peek(1))):
                value = self.read_number()
                self.add_token(TokenType.NUMBER, value, line, column)
                continue

            if char.isalpha() or char == "_":
                self._tokenize_word(line, column)
                continue

            raise self.error(f"Unexpected character: {char!r}")

        self.add_token(TokenType.EOF, "", self.line, self.column)
        logger.debug("Tokenized %s into %d tokens", self.path or "<source>", len(self.tokens))
        return self.tokens

    def _tokenize_word(self, line: int, column: int) -> None:
        word = self.read_word()
        upper = word.upper()

        if upper == LINE_COMMENT:
            self.skip_line_comment()
            return
        if upper == BLOCK_COMMENT_START:
            self.skip_block_comment(line, column)
            return

        for phrase in COMPOUND_PREFIXES.get(word, []):
            if self.match_phrase(phrase):
                self.add_token(COMPOUND_KEYWORDS[phrase], " ".join(phrase), line, column)
                return

        if word in SINGLE_KEYWORDS:
            self.add_token(SINGLE_KEYWORDS[word], word, line, column)
        elif word in BOOLEAN_LITERALS:
            self.add_token(TokenType.BOOLEAN, word, line, column)
        else:
            self.add_token(TokenType.IDENTIFIER, word, line, column)


def tokenize(source: str, path: str = "") -> List[Token]:
    """Tokenize LOLCODE source code."""
    lexer = Lexer(source, path)
    return lexer.tokenize()


def count_code_lines(tokens: Iterable[Token]) -> int:
    """Number of distinct source lines carrying at least one real token."""
    return len({
        token.line
        for token in tokens
        if token.type not in (TokenType.NEWLINE, TokenType.EOF)
    })


__all__ = ["Token", "TokenType", "Lexer", "tokenize", "count_code_lines"]
