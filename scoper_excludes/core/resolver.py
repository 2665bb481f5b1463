"""
NameResolver — Attach fully-qualified names to declarations.

Runs as a visitor ahead of Categorize so that every class, interface,
trait, function and constant carries its namespaced name by the time
the categorizer leaves the node.

Resolution rules for function calls follow PHP's runtime lookup:
- \\foo           -> foo (already fully qualified)
- namespace\\foo  -> <current namespace>\\foo
- Foo\\bar        -> first segment through `use` imports, else namespace prefix
- foo             -> `use function` import if any, else unchanged
                     (PHP falls back to the global function at runtime)
"""

from typing import Dict, List, Optional

from .nodes import DECLARATION_KINDS, ExprKind, Name, Node, NodeKind
from .traverser import NodeVisitor


class NameResolver(NodeVisitor):
    """Visitor that fills namespaced_name attributes and resolves call names."""

    def __init__(self):
        self._namespace: Optional[Name] = None
        self._aliases: Dict[str, Dict[str, Name]] = {}
        self._reset_aliases()

    def before_traverse(self, nodes: List[Node]) -> None:
        self._namespace = None
        self._reset_aliases()
        return None

    def enter_node(self, node: Node) -> None:
        if node.kind is NodeKind.NAMESPACE:
            self._namespace = node.name
            self._reset_aliases()
        elif node.kind is NodeKind.USE:
            self._add_aliases(node)
        elif node.kind in DECLARATION_KINDS:
            node.namespaced_name = Name([node.name]).prepend(self._namespace)
        elif node.kind is NodeKind.CONST:
            for const in node.consts:
                const.namespaced_name = Name([const.name]).prepend(self._namespace)
        elif node.kind is NodeKind.EXPRESSION:
            if node.expr.kind is ExprKind.CALL and isinstance(node.expr.name, Name):
                node.expr.name = self.resolve_function_name(node.expr.name)
        return None

    def leave_node(self, node: Node) -> None:
        if node.kind is NodeKind.NAMESPACE:
            # Braced namespaces end here; statement-form ones end at the next
            self._namespace = None
            self._reset_aliases()
        return None

    def resolve_function_name(self, name: Name) -> Name:
        """
        Resolve a called function's name in the current scope.

        Args:
            name: Name as written at the call site

        Returns:
            Resolved Name; unqualified names without an import are returned as-is
        """
        if name.type == "fully_qualified":
            return name
        if name.type == "relative":
            return name.prepend(self._namespace)
        if name.type == "qualified":
            imported = self._aliases["normal"].get(name.first.lower())
            if imported is not None:
                return Name(imported.parts + name.parts[1:], "fully_qualified")
            return name.prepend(self._namespace)

        imported = self._aliases["function"].get(name.first.lower())
        if imported is not None:
            return Name(list(imported.parts), "fully_qualified")
        return name

    def _reset_aliases(self) -> None:
        self._aliases = {"normal": {}, "function": {}, "const": {}}

    def _add_aliases(self, node: Node) -> None:
        table = self._aliases.setdefault(node.type, {})
        for use in node.uses:
            # Constant aliases are case-sensitive; class and function ones are not
            key = use.effective_alias
            if node.type != "const":
                key = key.lower()
            table[key] = use.name
