"""Statement nodes of the LOLCODE AST.

The tree is strictly hierarchical: every node owns its children and no
node is shared between parents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .expressions import Expression
from .source_location import SourceLocation

__all__ = [
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


@dataclass
class Statement:
    """Base class for statements."""

    pass


@dataclass
class Declaration(Statement):
    """I HAS A name [ITZ initializer]"""
    name: str
    location: SourceLocation
    initializer: Optional[Expression] = None


@dataclass
class Assignment(Statement):
    """target R value"""
    target: str
    value: Expression
    location: SourceLocation


@dataclass
class PrintStatement(Statement):
    """VISIBLE expr [expr ...] [!]"""
    expressions: List[Expression]
    location: SourceLocation
    suppress_newline: bool = False


@dataclass
class InputStatement(Statement):
    """GIMMEH target"""
    target: str
    location: SourceLocation


@dataclass
class ExpressionStatement(Statement):
    """A bare expression; its value lands in IT."""
    expression: Expression
    location: SourceLocation


@dataclass
class ConditionalBranch:
    """MEBBE condition ... arm of an O RLY? block."""
    condition: Expression
    location: SourceLocation
    body: List[Statement] = field(default_factory=list)


@dataclass
class Conditional(Statement):
    """O RLY? / YA RLY / MEBBE / NO WAI / OIC

    ``negative`` is ``None`` when the NO WAI arm is absent and an empty
    list when it is present but empty.
    """
    condition: Expression
    location: SourceLocation
    affirmative: List[Statement] = field(default_factory=list)
    alternatives: List[ConditionalBranch] = field(default_factory=list)
    negative: Optional[List[Statement]] = None


class StepOperation(Enum):
    UPPIN = "UPPIN"
    NERFIN = "NERFIN"


@dataclass
class LoopStep:
    """UPPIN|NERFIN YR variable"""
    operation: StepOperation
    variable: str
    location: SourceLocation


class LoopPolarity(Enum):
    TIL = "TIL"
    WILE = "WILE"


@dataclass
class LoopTest:
    """TIL|WILE expression"""
    polarity: LoopPolarity
    expression: Expression


@dataclass
class Loop(Statement):
    """IM IN YR label ... IM OUTTA YR label"""
    label: str
    location: SourceLocation
    step: Optional[LoopStep] = None
    test: Optional[LoopTest] = None
    body: List[Statement] = field(default_factory=list)


@dataclass
class BreakStatement(Statement):
    """GTFO"""
    location: SourceLocation


@dataclass
class Program:
    """HAI [version] ... KTHXBYE"""
    location: SourceLocation
    version: str = "1.2"
    statements: List[Statement] = field(default_factory=list)
