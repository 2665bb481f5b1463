"""
Node Model — Declaration and statement nodes fed to the traverser.

A closed set of node variants, each tagged with a NodeKind member so that
visitors dispatch on the kind instead of inspecting Python types.
Expressions are a second closed set tagged with ExprKind.

Only the shapes the categorizer cares about are modelled precisely.
Every other statement that can contain declarations (if/while/try bodies,
function bodies, class bodies) becomes a Block so nested declarations are
still visited.

Usage:
    from scoper_excludes.core.nodes import Declaration, NodeKind, Name

    node = Declaration(NodeKind.CLASS, "Foo")
    node.namespaced_name = Name.parse("App\\Foo")
    str(node.namespaced_name)  # 'App\\Foo'
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional, Union


class NodeKind(Enum):
    """Statement node variants."""
    NAMESPACE = "namespace"
    USE = "use"
    CLASS = "class"
    INTERFACE = "interface"
    TRAIT = "trait"
    FUNCTION = "function"
    CONST = "const"
    EXPRESSION = "expression"
    BLOCK = "block"


class ExprKind(Enum):
    """Expression node variants."""
    CALL = "call"
    STRING = "string"
    INTERPOLATED_STRING = "interpolated_string"
    NUMBER = "number"
    CONCAT = "concat"
    OTHER = "other"


DECLARATION_KINDS = frozenset({
    NodeKind.CLASS,
    NodeKind.INTERFACE,
    NodeKind.TRAIT,
    NodeKind.FUNCTION,
})


# =============================================================================
# Names
# =============================================================================

@dataclass
class Name:
    """
    A (possibly namespaced) PHP name.

    Attributes:
        parts: Name segments, e.g. ['App', 'Foo']
        type: "unqualified" | "qualified" | "fully_qualified" | "relative"
    """
    parts: List[str]
    type: str = "unqualified"

    @classmethod
    def parse(cls, text: str) -> 'Name':
        """
        Build a Name from source text.

        Examples:
            'define'            -> unqualified
            'Foo\\Bar'          -> qualified
            '\\Foo\\Bar'        -> fully_qualified
            'namespace\\Foo'    -> relative
        """
        text = "".join(text.split())
        if text.startswith("\\"):
            return cls(text[1:].split("\\"), "fully_qualified")
        parts = text.split("\\")
        if len(parts) > 1 and parts[0].lower() == "namespace":
            return cls(parts[1:], "relative")
        if len(parts) > 1:
            return cls(parts, "qualified")
        return cls(parts, "unqualified")

    @property
    def first(self) -> str:
        return self.parts[0]

    @property
    def last(self) -> str:
        return self.parts[-1]

    def prepend(self, prefix: Optional['Name']) -> 'Name':
        """Return a fully-qualified name with prefix's parts in front."""
        if prefix is None:
            return Name(list(self.parts), "fully_qualified")
        return Name(prefix.parts + self.parts, "fully_qualified")

    def __str__(self) -> str:
        return "\\".join(self.parts)


# =============================================================================
# Expressions
# =============================================================================

@dataclass
class StringLiteral:
    """Plain string literal with escapes already decoded."""
    kind: ClassVar[ExprKind] = ExprKind.STRING
    value: str


@dataclass
class InterpolatedString:
    """Double-quoted or heredoc string containing interpolation."""
    kind: ClassVar[ExprKind] = ExprKind.INTERPOLATED_STRING
    raw: str


@dataclass
class NumberLiteral:
    """Integer or float literal, kept as source text."""
    kind: ClassVar[ExprKind] = ExprKind.NUMBER
    raw: str

    @property
    def is_float(self) -> bool:
        text = self.raw.lower()
        if text.startswith(("0x", "0b")):
            return False
        return any(c in text for c in ".e")


@dataclass
class Concat:
    """Binary '.' concatenation."""
    kind: ClassVar[ExprKind] = ExprKind.CONCAT
    left: 'Expr'
    right: 'Expr'


@dataclass
class OtherExpr:
    """Any expression the model does not represent precisely."""
    kind: ClassVar[ExprKind] = ExprKind.OTHER
    node_type: str
    raw: str = ""


@dataclass
class Arg:
    """
    A call argument.

    Attributes:
        value: Argument expression
        name: Parameter name for named arguments (PHP 8)
    """
    value: 'Expr'
    name: Optional[str] = None


@dataclass
class FuncCall:
    """
    Function call expression.

    `name` is a Name for direct calls and any other expression for
    dynamic calls such as `$callback(...)`.
    """
    kind: ClassVar[ExprKind] = ExprKind.CALL
    name: Union[Name, 'Expr']
    args: List[Arg] = field(default_factory=list)


Expr = Union[StringLiteral, InterpolatedString, NumberLiteral, Concat, OtherExpr, FuncCall]


# =============================================================================
# Statements
# =============================================================================

@dataclass
class Declaration:
    """
    Class, interface, trait, or function declaration.

    namespaced_name is filled by NameResolver; nodes that never went
    through resolution keep None.
    """
    kind: NodeKind
    name: str
    stmts: List['Node'] = field(default_factory=list)
    namespaced_name: Optional[Name] = None
    line: int = 0

    def __post_init__(self):
        if self.kind not in DECLARATION_KINDS:
            raise ValueError(f"{self.kind} is not a declaration kind")

    def children(self) -> List['Node']:
        return self.stmts


@dataclass
class ConstElement:
    """One `NAME = value` entry of a const statement."""
    name: str
    namespaced_name: Optional[Name] = None
    line: int = 0


@dataclass
class ConstStatement:
    """`const A = 1, B = 2;` at namespace level."""
    kind: ClassVar[NodeKind] = NodeKind.CONST
    consts: List[ConstElement] = field(default_factory=list)
    line: int = 0

    def children(self) -> List['Node']:
        return []


@dataclass
class UseItem:
    name: Name
    alias: Optional[str] = None

    @property
    def effective_alias(self) -> str:
        return self.alias or self.name.last


@dataclass
class UseStatement:
    """
    `use` import statement.

    Attributes:
        type: "normal" | "function" | "const"
        uses: Imported names
    """
    kind: ClassVar[NodeKind] = NodeKind.USE
    type: str = "normal"
    uses: List[UseItem] = field(default_factory=list)
    line: int = 0

    def children(self) -> List['Node']:
        return []


@dataclass
class Namespace:
    """Namespace block; name is None for the global namespace `namespace { }`."""
    kind: ClassVar[NodeKind] = NodeKind.NAMESPACE
    name: Optional[Name] = None
    stmts: List['Node'] = field(default_factory=list)
    line: int = 0

    def children(self) -> List['Node']:
        return self.stmts


@dataclass
class ExpressionStatement:
    """
    Expression used as a statement.

    stmts holds declarations found inside the expression (closure bodies),
    so they are traversed like any other nested statement.
    """
    kind: ClassVar[NodeKind] = NodeKind.EXPRESSION
    expr: Expr
    stmts: List['Node'] = field(default_factory=list)
    line: int = 0

    def children(self) -> List['Node']:
        return self.stmts


@dataclass
class Block:
    """Any other statement, kept only for the declarations nested in it."""
    kind: ClassVar[NodeKind] = NodeKind.BLOCK
    node_type: str = "block"
    stmts: List['Node'] = field(default_factory=list)
    line: int = 0

    def children(self) -> List['Node']:
        return self.stmts


Node = Union[Declaration, ConstStatement, UseStatement, Namespace, ExpressionStatement, Block]
