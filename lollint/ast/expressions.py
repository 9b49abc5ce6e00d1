"""Expression nodes of the LOLCODE AST."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .source_location import SourceLocation

__all__ = [
    "Expression",
    "LiteralKind",
    "Literal",
    "VariableReference",
    "BinaryOperator",
    "BinaryExpression",
    "UnaryOperator",
    "UnaryExpression",
]


@dataclass
class Expression:
    """Base class for all expression types."""

    pass


class LiteralKind(Enum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"


@dataclass
class Literal(Expression):
    """Literal value: NUMBR/NUMBAR, YARN or TROOF."""
    kind: LiteralKind
    value: Union[int, float, str, bool]
    raw: str
    location: SourceLocation


@dataclass
class VariableReference(Expression):
    """Variable reference: x

    ``implicit`` marks references the parser synthesized, such as the
    ``IT`` tested by an ``O RLY?`` with no preceding expression.
    """
    name: str
    location: SourceLocation
    implicit: bool = False


class BinaryOperator(Enum):
    """Binary operators, valued by their source spelling."""

    SUM = "SUM OF"
    DIFF = "DIFF OF"
    PRODUKT = "PRODUKT OF"
    QUOSHUNT = "QUOSHUNT OF"
    MOD = "MOD OF"
    BIGGR = "BIGGR OF"
    SMALLR = "SMALLR OF"
    BOTH_SAEM = "BOTH SAEM"
    DIFFRINT = "DIFFRINT"
    BOTH = "BOTH OF"
    EITHER = "EITHER OF"
    WON = "WON OF"

    @property
    def is_comparison(self) -> bool:
        return self in (BinaryOperator.BOTH_SAEM, BinaryOperator.DIFFRINT)


@dataclass
class BinaryExpression(Expression):
    """Binary operation: OP left AN right"""
    operator: BinaryOperator
    left: Expression
    right: Expression
    location: SourceLocation


class UnaryOperator(Enum):
    NOT = "NOT"


@dataclass
class UnaryExpression(Expression):
    """Unary operation: NOT operand"""
    operator: UnaryOperator
    operand: Expression
    location: SourceLocation
