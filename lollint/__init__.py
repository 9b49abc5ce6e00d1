"""
lollint - a strict static analyzer for LOLCODE.

The package checks LOLCODE programs before they are ever run.  Analysis
is a three stage pipeline:

* ``lang.lexer``: turns source text into tokens, folding compound
  keyword phrases (``I HAS A``, ``IM IN YR`` …) into single tokens and
  stripping ``BTW``/``OBTW`` comments.
* ``lang.parser``: a strict recursive descent parser producing the AST
  defined in ``ast``.  The first grammar violation aborts the run.
* ``linter``: a single scoped walk over the tree that collects errors
  (undeclared or doubly declared variables) and quality warnings
  (unused variables, constant comparisons, empty blocks, missing
  ``NO WAI`` branches) together with code statistics.

``cli`` ties everything together for terminals and CI pipelines.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("lollint")
except _metadata.PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "0.1.0"

from .errors import LolError, LolLexError, LolSyntaxError
from .lang import tokenize, parse, parse_source
from .linter import SemanticLinter, LintResult, lint

__all__ = [
    "__version__",
    "LolError",
    "LolLexError",
    "LolSyntaxError",
    "tokenize",
    "parse",
    "parse_source",
    "SemanticLinter",
    "LintResult",
    "lint",
]
