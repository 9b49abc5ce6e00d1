"""
LOLCODE keywords and grammar constants.

Single source of truth for the keyword spellings the tokenizer folds into
tokens.  LOLCODE spells several keywords as phrases (``I HAS A``,
``IM OUTTA YR``); these are listed in ``COMPOUND_KEYWORDS`` and the
tokenizer matches them greedily, longest phrase first.
"""

from __future__ import annotations

import difflib
from typing import Dict, FrozenSet, List, Optional, Tuple

from .tokens import TokenType


LANGUAGE_VERSION = "1.2"

SINGLE_KEYWORDS: Dict[str, TokenType] = {
    "HAI": TokenType.HAI,
    "KTHXBYE": TokenType.KTHXBYE,
    "ITZ": TokenType.ITZ,
    "R": TokenType.R,
    "AN": TokenType.AN,
    "VISIBLE": TokenType.VISIBLE,
    "GIMMEH": TokenType.GIMMEH,
    "DIFFRINT": TokenType.DIFFRINT,
    "NOT": TokenType.NOT,
    "MEBBE": TokenType.MEBBE,
    "OIC": TokenType.OIC,
    "UPPIN": TokenType.UPPIN,
    "NERFIN": TokenType.NERFIN,
    "YR": TokenType.YR,
    "TIL": TokenType.TIL,
    "WILE": TokenType.WILE,
    "GTFO": TokenType.GTFO,
}

COMPOUND_KEYWORDS: Dict[Tuple[str, ...], TokenType] = {
    ("I", "HAS", "A"): TokenType.I_HAS_A,
    ("SUM", "OF"): TokenType.SUM_OF,
    ("DIFF", "OF"): TokenType.DIFF_OF,
    ("PRODUKT", "OF"): TokenType.PRODUKT_OF,
    ("QUOSHUNT", "OF"): TokenType.QUOSHUNT_OF,
    ("MOD", "OF"): TokenType.MOD_OF,
    ("BIGGR", "OF"): TokenType.BIGGR_OF,
    ("SMALLR", "OF"): TokenType.SMALLR_OF,
    ("BOTH", "SAEM"): TokenType.BOTH_SAEM,
    ("BOTH", "OF"): TokenType.BOTH_OF,
    ("EITHER", "OF"): TokenType.EITHER_OF,
    ("WON", "OF"): TokenType.WON_OF,
    ("O", "RLY?"): TokenType.O_RLY,
    ("YA", "RLY"): TokenType.YA_RLY,
    ("NO", "WAI"): TokenType.NO_WAI,
    ("IM", "IN", "YR"): TokenType.IM_IN_YR,
    ("IM", "OUTTA", "YR"): TokenType.IM_OUTTA_YR,
}

BOOLEAN_LITERALS: Dict[str, bool] = {"WIN": True, "FAIL": False}

# Comment markers are matched case-insensitively.
LINE_COMMENT = "BTW"
BLOCK_COMMENT_START = "OBTW"
BLOCK_COMMENT_END = "TLDR"

# First words of compound phrases, longest phrases first.
COMPOUND_PREFIXES: Dict[str, List[Tuple[str, ...]]] = {}
for _phrase in sorted(COMPOUND_KEYWORDS, key=len, reverse=True):
    COMPOUND_PREFIXES.setdefault(_phrase[0], []).append(_phrase)
del _phrase

ALL_KEYWORDS: FrozenSet[str] = frozenset(
    list(SINGLE_KEYWORDS)
    + [" ".join(phrase) for phrase in COMPOUND_KEYWORDS]
)


def suggest_keyword(word: str) -> Optional[str]:
    """
    Suggest the keyword phrase a stray word most likely belongs to.

    Examples:
        >>> suggest_keyword('SUM')
        'SUM OF'
        >>> suggest_keyword('VISIBEL')
        'VISIBLE'
        >>> suggest_keyword('xyz123') is None
        True
    """
    phrases = COMPOUND_PREFIXES.get(word)
    if phrases:
        return " ".join(phrases[0])

    close_matches = difflib.get_close_matches(word, sorted(ALL_KEYWORDS), n=1, cutoff=0.75)
    if close_matches:
        return close_matches[0]
    return None


__all__ = [
    "LANGUAGE_VERSION",
    "SINGLE_KEYWORDS",
    "COMPOUND_KEYWORDS",
    "COMPOUND_PREFIXES",
    "BOOLEAN_LITERALS",
    "LINE_COMMENT",
    "BLOCK_COMMENT_START",
    "BLOCK_COMMENT_END",
    "ALL_KEYWORDS",
    "suggest_keyword",
]
