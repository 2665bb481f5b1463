"""
Parsing configuration data structures.

Defines LanguageConfig — which files a grammar handles and how large
they may be before parsing is refused.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Set


@dataclass
class LanguageConfig:
    """
    Configuration for parsing a specific programming language.

    Attributes:
        name: Human-readable name (e.g., "PHP")
        tree_sitter_name: Grammar name for tree-sitter (e.g., "php")
        extensions: File extensions this config handles (e.g., {'.php'})
        max_file_size: Refuse files larger than this (bytes, default 1MB)
        exclude_patterns: Glob patterns to exclude (e.g., ['**/.git/*'])
    """
    # Identity
    name: str
    tree_sitter_name: str
    extensions: Set[str]

    max_file_size: int = 1_000_000

    # Exclusions
    exclude_patterns: List[str] = field(default_factory=list)

    def matches_extension(self, ext: str) -> bool:
        """Check if this config handles the given extension."""
        return ext.lower() in self.extensions

    def should_exclude(self, rel_path: str) -> bool:
        """Check if a relative path should be excluded."""
        path = Path(rel_path)
        return any(path.match(pattern) for pattern in self.exclude_patterns)
