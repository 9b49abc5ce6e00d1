"""Test configuration and fixtures for linter tests."""

import pytest

from lollint.linter import SemanticLinter


@pytest.fixture
def linter():
    """Linter with default (lexical) scoping and every rule enabled."""
    return SemanticLinter()


@pytest.fixture
def lint_source(linter):
    """Lint a program body wrapped in HAI/KTHXBYE."""

    def _lint(*lines, linter_instance=None):
        source = "\n".join(["HAI 1.2", *lines, "KTHXBYE"]) + "\n"
        return (linter_instance or linter).lint_document(source, "test.lol")

    return _lint