"""Token definitions shared by the tokenizer and the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Coarse token classification."""

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    PUNCTUATION = "punctuation"
    EOF = "eof"


class TokenType(Enum):
    """Token types for LOLCODE."""

    # Literals
    NUMBER = auto()
    STRING = auto()
    BOOLEAN = auto()

    IDENTIFIER = auto()

    # Program structure
    HAI = auto()
    KTHXBYE = auto()

    # Variables
    I_HAS_A = auto()
    ITZ = auto()
    R = auto()

    # I/O
    VISIBLE = auto()
    GIMMEH = auto()

    # Operators
    SUM_OF = auto()
    DIFF_OF = auto()
    PRODUKT_OF = auto()
    QUOSHUNT_OF = auto()
    MOD_OF = auto()
    BIGGR_OF = auto()
    SMALLR_OF = auto()
    BOTH_SAEM = auto()
    DIFFRINT = auto()
    BOTH_OF = auto()
    EITHER_OF = auto()
    WON_OF = auto()
    NOT = auto()
    AN = auto()

    # Conditionals
    O_RLY = auto()
    YA_RLY = auto()
    MEBBE = auto()
    NO_WAI = auto()
    OIC = auto()

    # Loops
    IM_IN_YR = auto()
    IM_OUTTA_YR = auto()
    UPPIN = auto()
    NERFIN = auto()
    YR = auto()
    TIL = auto()
    WILE = auto()
    GTFO = auto()

    # Punctuation
    NEWLINE = auto()
    BANG = auto()

    EOF = auto()

    @property
    def kind(self) -> TokenKind:
        if self is TokenType.NUMBER:
            return TokenKind.NUMBER
        if self is TokenType.STRING:
            return TokenKind.STRING
        if self is TokenType.BOOLEAN:
            return TokenKind.BOOLEAN
        if self is TokenType.IDENTIFIER:
            return TokenKind.IDENTIFIER
        if self in (TokenType.NEWLINE, TokenType.BANG):
            return TokenKind.PUNCTUATION
        if self is TokenType.EOF:
            return TokenKind.EOF
        return TokenKind.KEYWORD

    @property
    def display(self) -> str:
        """Source spelling used in error messages."""
        if self.kind is TokenKind.KEYWORD:
            spelling = self.name.replace("_", " ")
            return "O RLY?" if self is TokenType.O_RLY else spelling
        return self.name.lower().replace("_", " ")


@dataclass(frozen=True)
class Token:
    """A single token with position information."""

    type: TokenType
    value: str
    line: int
    column: int

    @property
    def kind(self) -> TokenKind:
        return self.type.kind

    def describe(self) -> str:
        if self.type is TokenType.EOF:
            return "end of file"
        if self.type is TokenType.NEWLINE:
            return "end of line"
        if self.kind is TokenKind.KEYWORD:
            return f"'{self.value}'"
        if self.type is TokenType.STRING:
            return f'string "{self.value}"'
        return f"{self.type.display} '{self.value}'"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


__all__ = ["Token", "TokenKind", "TokenType"]
