"""
Core layer — node model, traversal, name resolution and categorization.
"""

from .nodes import (
    NodeKind, ExprKind, Name,
    Declaration, ConstStatement, ConstElement, UseStatement, UseItem,
    Namespace, ExpressionStatement, Block,
    FuncCall, Arg, StringLiteral, InterpolatedString, NumberLiteral, Concat, OtherExpr,
)
from .traverser import NodeVisitor, NodeTraverser
from .resolver import NameResolver
from .categorize import Categorize, SymbolLists
from .literals import literal_to_string

__all__ = [
    'NodeKind', 'ExprKind', 'Name',
    'Declaration', 'ConstStatement', 'ConstElement', 'UseStatement', 'UseItem',
    'Namespace', 'ExpressionStatement', 'Block',
    'FuncCall', 'Arg', 'StringLiteral', 'InterpolatedString', 'NumberLiteral', 'Concat', 'OtherExpr',
    'NodeVisitor', 'NodeTraverser',
    'NameResolver',
    'Categorize', 'SymbolLists',
    'literal_to_string',
]
