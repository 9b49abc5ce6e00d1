"""LOLCODE parser package.

Public API:
    parse(tokens, path) -> Program
    parse_source(source, path) -> Program
    LolParser - The parser class
"""

from typing import Sequence

from lollint.ast import Program
from ..lexer import tokenize
from ..tokens import Token
from .parse import LolParser


def parse(tokens: Sequence[Token], path: str = "") -> Program:
    """
    Parse a token stream into a ``Program``.

    Raises:
        LolSyntaxError: On the first grammar violation.
    """
    return LolParser(tokens, path=path).parse()


def parse_source(source: str, path: str = "") -> Program:
    """
    Tokenize and parse LOLCODE source.

    Raises:
        LolLexError: If the source cannot be tokenized.
        LolSyntaxError: On the first grammar violation.

    Example:
        ```python
        program = parse_source('HAI 1.2\\nVISIBLE "O HAI"\\nKTHXBYE\\n')
        print(program.version)  # "1.2"
        ```
    """
    return parse(tokenize(source, path), path=path)


__all__ = ["parse", "parse_source", "LolParser"]
