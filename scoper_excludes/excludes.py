"""
ExcludesGenerator — Categorized symbol lists for PHP files.

Runs parse -> NameResolver -> Categorize for each file and hands back
the five sorted lists. One Categorize instance is reused for every file
the generator sees, so per-file results follow the categorizer's reset
rules (interfaces carry over unless categorize.reset_interfaces is set).

Usage:
    generator = ExcludesGenerator(get_config())
    lists = generator.from_file(Path("stubs/wordpress.php"))
    lists.classes
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .config import Config
from .core.categorize import Categorize, SymbolLists
from .core.parsing import PHP_CONFIG, LanguageConfig, TreeSitterParser
from .core.resolver import NameResolver
from .core.traverser import NodeTraverser
from .errors import ParseError
from .logging_config import get_logger

logger = get_logger("excludes")


class ExcludesGenerator:
    """Parses PHP sources and categorizes their declarations."""

    def __init__(self, config: Optional[Config] = None, parser: Optional[TreeSitterParser] = None):
        self.config = config or Config()
        self.language = LanguageConfig(
            name=PHP_CONFIG.name,
            tree_sitter_name=PHP_CONFIG.tree_sitter_name,
            extensions=set(PHP_CONFIG.extensions),
            max_file_size=self.config.parsing.max_file_size,
            exclude_patterns=list(self.config.parsing.exclude_patterns),
        )
        self.parser = parser or TreeSitterParser(self.language)
        self.categorize = Categorize(reset_interfaces=self.config.categorize.reset_interfaces)
        self.traverser = NodeTraverser([NameResolver(), self.categorize])

    def from_nodes(self, nodes: List) -> SymbolLists:
        """Traverse already-built nodes and return the sorted lists."""
        self.traverser.traverse(nodes)
        return self.categorize.symbols()

    def from_source(self, content: str) -> SymbolLists:
        """
        Categorize PHP source text.

        Raises:
            ParseError: If the source cannot be parsed
            CategorizeError: If a node violates categorizer preconditions
        """
        return self.from_nodes(self.parser.parse(content))

    def from_file(self, path: Path) -> SymbolLists:
        """
        Categorize one PHP file.

        Raises:
            ParseError: If the file is not valid UTF-8
        """
        try:
            content = Path(path).read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise ParseError(f"{path} is not valid UTF-8: {e}") from e
        lists = self.from_source(content)
        logger.debug(
            "%s: %d classes, %d interfaces, %d functions, %d traits, %d constants",
            path, len(lists.classes), len(lists.interfaces), len(lists.functions),
            len(lists.traits), len(lists.constants),
        )
        return lists

    def from_paths(self, paths: Iterable[Path]) -> Dict[Path, SymbolLists]:
        """
        Categorize files and directories.

        Directories are expanded recursively to files with a PHP extension
        that match no exclude pattern. Results are keyed by file path in
        sorted order. The first failure propagates; nothing is returned
        for a partially processed set.
        """
        results: Dict[Path, SymbolLists] = {}
        for file_path in self.discover(paths):
            results[file_path] = self.from_file(file_path)
        return results

    def discover(self, paths: Iterable[Path]) -> List[Path]:
        """Expand paths into the sorted list of PHP files to scan."""
        files = set()
        for path in paths:
            path = Path(path)
            if path.is_dir():
                for candidate in path.rglob('*'):
                    if not candidate.is_file():
                        continue
                    if not self.language.matches_extension(candidate.suffix):
                        continue
                    if self.language.should_exclude(str(candidate)):
                        continue
                    files.add(candidate)
            else:
                # Explicit files are scanned whatever their extension
                files.add(path)
        return sorted(files)
