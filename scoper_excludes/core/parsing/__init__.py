"""
Parsing module — Build declaration nodes from source via tree-sitter.

- LanguageConfig: Per-language file matching rules
- TreeSitterParser: Grammar loading and syntax-error detection
- PhpTreeBuilder: Concrete syntax tree to node model

Usage:
    from scoper_excludes.core.parsing import TreeSitterParser, PHP_CONFIG

    nodes = TreeSitterParser(PHP_CONFIG).parse(content)
"""

from .config import LanguageConfig
from .builder import PhpTreeBuilder
from .parser import TreeSitterParser
from .languages import PHP_CONFIG

__all__ = [
    'LanguageConfig',
    'PhpTreeBuilder',
    'TreeSitterParser',
    'PHP_CONFIG',
]
