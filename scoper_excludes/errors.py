"""
Errors — Exception hierarchy for scoper-excludes.

Every failure is fatal to the pass that raised it. The categorizer never
recovers locally; callers catch ScoperExcludesError at the outer boundary.
"""


class ScoperExcludesError(Exception):
    """Base class for all scoper-excludes errors."""


class ConfigError(ScoperExcludesError):
    """Configuration file could not be read or is invalid."""


class ParseError(ScoperExcludesError):
    """Source text could not be turned into a node tree."""

    def __init__(self, message: str, line: int = 0):
        super().__init__(message)
        self.line = line


class ParserUnavailableError(ParseError):
    """The tree-sitter grammar could not be loaded."""


class CategorizeError(ScoperExcludesError, RuntimeError):
    """A node violated the categorizer's preconditions."""


class MissingNamespacedNameError(CategorizeError):
    """Declaration reached the categorizer without a resolved name."""


class EmptyConstantDeclarationError(CategorizeError):
    """Const statement declares no constants."""


class DefineNameError(CategorizeError):
    """define() call whose constant name cannot be determined."""


class UnsupportedLiteralError(ScoperExcludesError, ValueError):
    """Expression is not one of the literal shapes that convert to a string."""
