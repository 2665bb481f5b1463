"""
scoper-excludes — Declared PHP symbols for php-scoper exclude lists

Parses PHP sources, resolves namespaced names and buckets every declared
class, interface, function, trait and constant (including define() calls)
into naturally sorted lists.

Usage:
    scoper-excludes vendor/php-stubs/wordpress-stubs
    scoper-excludes stubs.php --compact
"""

__version__ = "0.1.0"

# Core layer
from .core.nodes import NodeKind, Name
from .core.traverser import NodeVisitor, NodeTraverser
from .core.resolver import NameResolver
from .core.categorize import Categorize, SymbolLists

# Services
from .excludes import ExcludesGenerator

# Config (stays at root)
from .config import Config, ConfigManager, get_config

from .errors import (
    ScoperExcludesError, ConfigError, ParseError, ParserUnavailableError,
    CategorizeError, MissingNamespacedNameError, EmptyConstantDeclarationError,
    DefineNameError, UnsupportedLiteralError,
)

__all__ = [
    # Core
    'NodeKind', 'Name',
    'NodeVisitor', 'NodeTraverser',
    'NameResolver',
    'Categorize', 'SymbolLists',
    # Services
    'ExcludesGenerator',
    # Config
    'Config', 'ConfigManager', 'get_config',
    # Errors
    'ScoperExcludesError', 'ConfigError', 'ParseError', 'ParserUnavailableError',
    'CategorizeError', 'MissingNamespacedNameError', 'EmptyConstantDeclarationError',
    'DefineNameError', 'UnsupportedLiteralError',
]
