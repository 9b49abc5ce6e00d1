"""Shared fixtures for the lollint test suite."""

import pytest


# Two errors and two warnings, one of each kind the linter reports first.
MIXED_FINDINGS_PROGRAM = '''HAI 1.2
VISIBLE x
I HAS A x ITZ 1
I HAS A y ITZ 2
I HAS A y ITZ 3
I HAS A unused
BOTH SAEM 5 AN 5
VISIBLE x y
KTHXBYE
'''

# 17 code lines, 3 variables, 1 loop, 1 conditional with NO WAI and
# 7 operator nodes; produces no diagnostics.
STATISTICS_PROGRAM = '''HAI 1.2
I HAS A counter ITZ 0
I HAS A total ITZ 0
I HAS A limit ITZ 10
IM IN YR loop UPPIN YR counter TIL BOTH SAEM counter AN limit
  total R SUM OF total AN counter
IM OUTTA YR loop
BIGGR OF total AN PRODUKT OF limit AN 2
O RLY?
  YA RLY
    VISIBLE "big"
  NO WAI
    VISIBLE DIFF OF total AN 1
OIC
VISIBLE total
VISIBLE NOT BOTH SAEM counter AN limit
KTHXBYE
'''

LABEL_MISMATCH_PROGRAM = '''HAI 1.2
I HAS A n ITZ 0
IM IN YR outer UPPIN YR n TIL BOTH SAEM n AN 3
  VISIBLE n
IM OUTTA YR inner
KTHXBYE
'''

CLEAN_PROGRAM = '''HAI 1.2
BTW greet the user
I HAS A name
GIMMEH name
VISIBLE "HAI " name "!"
KTHXBYE
'''


@pytest.fixture
def mixed_findings_program():
    return MIXED_FINDINGS_PROGRAM


@pytest.fixture
def statistics_program():
    return STATISTICS_PROGRAM


@pytest.fixture
def label_mismatch_program():
    return LABEL_MISMATCH_PROGRAM


@pytest.fixture
def clean_program():
    return CLEAN_PROGRAM


@pytest.fixture
def write_lol(tmp_path):
    """Write LOLCODE source into ``tmp_path`` and return the file path."""

    def _write(name, source):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path

    return _write
