"""
PHP language configuration.

Files are matched by extension; version control and dependency-manager
caches are skipped. vendor/ is not excluded.
"""

from ..config import LanguageConfig

# Matched with Path.match, where ** acts like a single *: each pattern
# excludes files directly inside the named directory, not deeper ones.
PHP_EXCLUDE_PATTERNS = [
    '**/.git/*',
    '**/.svn/*',
    '**/.hg/*',
    '**/node_modules/*',
    '**/.idea/*',
    '**/.vscode/*',
]


PHP_CONFIG = LanguageConfig(
    name="PHP",
    tree_sitter_name="php",
    extensions={'.php', '.inc', '.phtml'},
    exclude_patterns=list(PHP_EXCLUDE_PATTERNS),
)
