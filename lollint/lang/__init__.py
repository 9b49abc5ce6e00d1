"""LOLCODE language front end: tokens, keywords, lexer and parser."""

from .keywords import LANGUAGE_VERSION, suggest_keyword
from .tokens import Token, TokenKind, TokenType
from .lexer import Lexer, tokenize, count_code_lines
from .parser import LolParser, parse, parse_source

__all__ = [
    "LANGUAGE_VERSION",
    "suggest_keyword",
    "Token",
    "TokenKind",
    "TokenType",
    "Lexer",
    "tokenize",
    "count_code_lines",
    "LolParser",
    "parse",
    "parse_source",
]
