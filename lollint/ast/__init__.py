"""Dataclasses representing the LOLCODE abstract syntax tree."""

from .source_location import SourceLocation
from .expressions import (
    Expression,
    LiteralKind,
    Literal,
    VariableReference,
    BinaryOperator,
    BinaryExpression,
    UnaryOperator,
    UnaryExpression,
)
from .statements import (
    Statement,
    Declaration,
    Assignment,
    PrintStatement,
    InputStatement,
    ExpressionStatement,
    ConditionalBranch,
    Conditional,
    StepOperation,
    LoopStep,
    LoopPolarity,
    LoopTest,
    Loop,
    BreakStatement,
    Program,
)

__all__ = [
    "SourceLocation",
    "Expression",
    "LiteralKind",
    "Literal",
    "VariableReference",
    "BinaryOperator",
    "BinaryExpression",
    "UnaryOperator",
    "UnaryExpression",
    "Statement",
    "Declaration",
    "Assignment",
    "PrintStatement",
    "InputStatement",
    "ExpressionStatement",
    "ConditionalBranch",
    "Conditional",
    "StepOperation",
    "LoopStep",
    "LoopPolarity",
    "LoopTest",
    "Loop",
    "BreakStatement",
    "Program",
]
