"""
Categorize — Bucket declared symbol names for an excludes list.

A NodeVisitor that collects fully-qualified names of classes, interfaces,
functions, traits and constants (including constants created through
define()) while a NodeTraverser walks a resolved tree.

Usage:
    categorize = Categorize()
    NodeTraverser([NameResolver(), categorize]).traverse(nodes)

    categorize.classes()    # ['App\\Bar', 'App\\Foo']
    categorize.constants()  # ['App\\VERSION', 'DEBUG']

Readers return sorted copies; internal buckets keep insertion order.
Buckets are only meaningful after a traversal completed without raising.

Interfaces carry over: before_traverse clears every bucket except
interfaces unless the instance is built with reset_interfaces=True.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..errors import (
    DefineNameError,
    EmptyConstantDeclarationError,
    MissingNamespacedNameError,
    UnsupportedLiteralError,
)
from ..logging_config import get_logger
from ..utils.sorting import natural_sorted
from .literals import literal_to_string
from .nodes import Arg, ExprKind, Name, Node, NodeKind
from .traverser import NodeVisitor

logger = get_logger("categorize")

DEFINE_FUNCTION = "define"
CONSTANT_NAME_PARAMETER = "constant_name"


@dataclass
class SymbolLists:
    """The five sorted name lists produced by one traversal."""
    classes: List[str] = field(default_factory=list)
    interfaces: List[str] = field(default_factory=list)
    functions: List[str] = field(default_factory=list)
    traits: List[str] = field(default_factory=list)
    constants: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "classes": list(self.classes),
            "interfaces": list(self.interfaces),
            "functions": list(self.functions),
            "traits": list(self.traits),
            "constants": list(self.constants),
        }

    def is_empty(self) -> bool:
        return not any(self.to_dict().values())


class Categorize(NodeVisitor):
    """
    Collects declared symbol names into per-category buckets.

    Never replaces nodes. Every precondition violation raises a
    CategorizeError subclass and aborts the traversal.
    """

    def __init__(self, reset_interfaces: bool = False):
        """
        Args:
            reset_interfaces: Also clear the interfaces bucket before each
                traversal. Off by default, which keeps interface names
                from earlier traversals of the same instance.
        """
        self.reset_interfaces = reset_interfaces

        self._classes: List[str] = []
        self._interfaces: List[str] = []
        self._functions: List[str] = []
        self._traits: List[str] = []
        self._constants: List[str] = []

        self._handlers: Dict[NodeKind, Callable[[Node], None]] = {
            NodeKind.CLASS: self._add_class_name,
            NodeKind.INTERFACE: self._add_interface_name,
            NodeKind.FUNCTION: self._add_function_name,
            NodeKind.TRAIT: self._add_trait_name,
            NodeKind.CONST: self._add_constant_names,
            NodeKind.EXPRESSION: self._add_define_constant_name,
        }

    # -------------------------------------------------------------------------
    # Visitor hooks
    # -------------------------------------------------------------------------

    def before_traverse(self, nodes: List[Node]) -> None:
        self._reset()
        return None

    def leave_node(self, node: Node) -> None:
        handler = self._handlers.get(node.kind)
        if handler is not None:
            handler(node)
        return None

    # -------------------------------------------------------------------------
    # Readers
    # -------------------------------------------------------------------------

    def classes(self) -> List[str]:
        return natural_sorted(self._classes)

    def interfaces(self) -> List[str]:
        return natural_sorted(self._interfaces)

    def functions(self) -> List[str]:
        return natural_sorted(self._functions)

    def traits(self) -> List[str]:
        return natural_sorted(self._traits)

    def constants(self) -> List[str]:
        return natural_sorted(self._constants)

    def symbols(self) -> SymbolLists:
        """All five readers bundled together."""
        return SymbolLists(
            classes=self.classes(),
            interfaces=self.interfaces(),
            functions=self.functions(),
            traits=self.traits(),
            constants=self.constants(),
        )

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _reset(self) -> None:
        self._classes = []
        self._functions = []
        self._traits = []
        self._constants = []
        if self.reset_interfaces:
            self._interfaces = []

    def _add_class_name(self, node: Node) -> None:
        self._classes.append(_require_namespaced_name(node.namespaced_name, "Class", node.line))

    def _add_interface_name(self, node: Node) -> None:
        self._interfaces.append(_require_namespaced_name(node.namespaced_name, "Interface", node.line))

    def _add_function_name(self, node: Node) -> None:
        self._functions.append(_require_namespaced_name(node.namespaced_name, "Function", node.line))

    def _add_trait_name(self, node: Node) -> None:
        self._traits.append(_require_namespaced_name(node.namespaced_name, "Trait", node.line))

    def _add_constant_names(self, node: Node) -> None:
        if not node.consts:
            raise EmptyConstantDeclarationError(
                "Constant declaration node has no constants."
            )

        # All entries are checked before any is added
        names = [
            _require_namespaced_name(const.namespaced_name, "Const", const.line or node.line)
            for const in node.consts
        ]
        self._constants.extend(names)

    def _add_define_constant_name(self, node: Node) -> None:
        call = node.expr
        if call.kind is not ExprKind.CALL or not _is_define(call.name):
            return

        if not call.args:
            raise DefineNameError("define() declaration has no constant name.")

        value = _constant_name_argument(call.args).value
        if value.kind is ExprKind.INTERPOLATED_STRING:
            logger.debug(
                "Skipping define() with interpolated name %s on line %d",
                value.raw, node.line
            )
            return

        try:
            constant_name = literal_to_string(value)
        except UnsupportedLiteralError as e:
            raise DefineNameError(
                f"define() declaration has no constant name.\n{e}"
            ) from e

        self._constants.append(constant_name)


def _is_define(name) -> bool:
    return isinstance(name, Name) and str(name) == DEFINE_FUNCTION


def _constant_name_argument(args: List[Arg]) -> Arg:
    """The argument named constant_name, else the first one."""
    for arg in args:
        if arg.name == CONSTANT_NAME_PARAMETER:
            return arg
    return args[0]


def _require_namespaced_name(name: Optional[Name], label: str, line: int = 0) -> str:
    if name is None:
        location = f" (line {line})" if line else ""
        raise MissingNamespacedNameError(
            f"{label} node was expected to have a namespacedName attribute{location}."
        )
    return str(name)
