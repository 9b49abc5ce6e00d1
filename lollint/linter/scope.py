"""Symbol table used during the lint walk.

A stack of frames, one per active block.  Lookups scan from the innermost
frame outwards; declarations go into the innermost frame unless the stack
is flat.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from lollint.ast import SourceLocation


@dataclass
class Symbol:
    name: str
    location: SourceLocation
    used: bool = False
    # loop temporaries introduced by UPPIN/NERFIN YR
    implicit: bool = False


class ScopeStack:
    """
    Stack of ``name -> Symbol`` frames.

    With ``flat=True`` only the program frame is ever created: nested
    pushes and pops are counted but share that frame, so double
    declarations are judged program-wide.  An ``isolated`` push always
    gets its own frame; it holds the implicit loop temporaries, which
    disappear when the loop is popped.
    """

    def __init__(self, *, flat: bool = False, builtins: Iterable[str] = ("IT",)):
        self.flat = flat
        self.builtins = frozenset(builtins)
        self.frames: List[Dict[str, Symbol]] = []
        # one entry per push, True when that push created a frame
        self._pushed: List[bool] = []

    @property
    def depth(self) -> int:
        return len(self._pushed)

    def push(self, *, isolated: bool = False) -> None:
        creates_frame = isolated or not self.flat or not self.frames
        self._pushed.append(creates_frame)
        if creates_frame:
            self.frames.append({})

    def pop(self) -> List[Symbol]:
        """Pop the innermost frame and return its symbols in declaration order."""
        if not self._pushed:
            raise IndexError("pop from empty scope stack")
        if not self._pushed.pop():
            return []
        return list(self.frames.pop().values())

    def declare(self, name: str, location: SourceLocation, *, implicit: bool = False) -> bool:
        """
        Declare ``name``; False if it already exists in the target frame.

        The target is the innermost frame, or the program frame for
        ordinary declarations in flat mode.
        """
        frame = self.frames[-1] if implicit or not self.flat else self.frames[0]
        if name in frame:
            return False
        frame[name] = Symbol(name=name, location=location, used=implicit, implicit=implicit)
        return True

    def lookup(self, name: str) -> Optional[Symbol]:
        for frame in reversed(self.frames):
            symbol = frame.get(name)
            if symbol is not None:
                return symbol
        return None

    def use(self, name: str) -> bool:
        """Resolve ``name`` innermost-first and mark it used; False if unresolved."""
        symbol = self.lookup(name)
        if symbol is not None:
            symbol.used = True
            return True
        return name in self.builtins


__all__ = ["Symbol", "ScopeStack"]
