"""
TreeSitterParser — Parse PHP source into the node model via tree-sitter.

Uses tree-sitter-language-pack for the grammar and PhpTreeBuilder to
turn the concrete syntax tree into declaration/statement nodes.

Usage:
    from scoper_excludes.core.parsing import TreeSitterParser, PHP_CONFIG

    parser = TreeSitterParser(PHP_CONFIG)
    nodes = parser.parse("<?php namespace App; class Foo {}")
"""

from typing import TYPE_CHECKING, List, Optional

from ...errors import ParseError, ParserUnavailableError
from ...logging_config import get_logger
from .builder import PhpTreeBuilder
from .config import LanguageConfig

if TYPE_CHECKING:
    from tree_sitter import Node, Parser

logger = get_logger("parsing")


class TreeSitterParser:
    """
    Parses source text for one language configuration.

    The tree-sitter parser is loaded on first use and reused afterwards.
    """

    def __init__(self, config: LanguageConfig):
        """
        Initialize parser for a language.

        Args:
            config: LanguageConfig providing grammar name and size limit
        """
        self.config = config
        self._parser: Optional['Parser'] = None

    def _get_parser(self) -> 'Parser':
        """
        Get tree-sitter parser for the configured grammar (lazy-loaded).

        Raises:
            ParserUnavailableError: If the grammar cannot be loaded
        """
        if self._parser is not None:
            return self._parser

        try:
            from tree_sitter_language_pack import get_parser
            self._parser = get_parser(self.config.tree_sitter_name)
        except Exception as e:
            # Download failures from newer language packs derive from Exception
            raise ParserUnavailableError(
                f"tree-sitter grammar '{self.config.tree_sitter_name}' is not available: {e}"
            ) from e

        logger.debug("Loaded tree-sitter grammar %s", self.config.tree_sitter_name)
        return self._parser

    def parse(self, content: str) -> List:
        """
        Parse source text into top-level statement nodes.

        Args:
            content: Source file content

        Returns:
            List of node-model statements

        Raises:
            ParseError: If the content is too large or has syntax errors
        """
        source = content.encode('utf-8')
        if len(source) > self.config.max_file_size:
            raise ParseError(
                f"Source is {len(source)} bytes, larger than the "
                f"{self.config.max_file_size} byte limit for {self.config.name}."
            )

        tree = self._get_parser().parse(source)
        root = tree.root_node

        if root.has_error:
            error_node = _find_error(root)
            line = error_node.start_point[0] + 1 if error_node is not None else 0
            raise ParseError(f"Syntax error on line {line}.", line=line)

        return PhpTreeBuilder(source).build(root)


def _find_error(node: 'Node') -> Optional['Node']:
    """Return the first ERROR or missing node in document order."""
    if node.type == 'ERROR' or node.is_missing:
        return node
    for child in node.children:
        if child.has_error:
            found = _find_error(child)
            if found is not None:
                return found
    return None
