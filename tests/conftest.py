"""
Shared pytest fixtures for the scoper-excludes test suite.

The `generator` fixture parses real PHP and needs tree-sitter-language-pack.
"""

import pytest

from scoper_excludes.config import Config
from scoper_excludes.core.categorize import Categorize
from scoper_excludes.core.traverser import NodeTraverser


@pytest.fixture
def categorize():
    """A fresh Categorize visitor with default reset behaviour."""
    return Categorize()


@pytest.fixture
def run(categorize):
    """
    Traverse pre-resolved nodes with Categorize and return the visitor.

    Example:
        def test_x(run):
            result = run([class_node("Foo", "App\\Foo")])
            assert result.classes() == ["App\\Foo"]
    """
    traverser = NodeTraverser([categorize])

    def _run(nodes):
        traverser.traverse(nodes)
        return categorize

    return _run


@pytest.fixture
def generator():
    """ExcludesGenerator with default config; needs the PHP grammar."""
    from scoper_excludes.excludes import ExcludesGenerator
    return ExcludesGenerator(Config())
