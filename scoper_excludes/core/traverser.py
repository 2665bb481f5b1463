"""
NodeTraverser — Depth-first walk over the node model with visitor hooks.

Visitors subclass NodeVisitor and override the hooks they need. Hooks
return None to leave the tree alone; returning a node (or, for the
before/after hooks, a node list) replaces what was passed in.

Usage:
    traverser = NodeTraverser([NameResolver(), Categorize()])
    traverser.traverse(nodes)
"""

from typing import List, Optional

from ..logging_config import get_logger
from .nodes import Node

logger = get_logger("traverser")


class NodeVisitor:
    """Base visitor with no-op hooks."""

    def before_traverse(self, nodes: List[Node]) -> Optional[List[Node]]:
        return None

    def enter_node(self, node: Node) -> Optional[Node]:
        return None

    def leave_node(self, node: Node) -> Optional[Node]:
        return None

    def after_traverse(self, nodes: List[Node]) -> Optional[List[Node]]:
        return None


class NodeTraverser:
    """
    Walks a node list depth-first, calling every visitor per node.

    Order per node: enter_node for each visitor (in registration order),
    then the node's children, then leave_node for each visitor.
    Visitor exceptions propagate unchanged and abort the walk.
    """

    def __init__(self, visitors: Optional[List[NodeVisitor]] = None):
        self.visitors: List[NodeVisitor] = list(visitors or [])

    def add_visitor(self, visitor: NodeVisitor) -> None:
        self.visitors.append(visitor)

    def traverse(self, nodes: List[Node]) -> List[Node]:
        """
        Traverse a list of top-level nodes.

        Args:
            nodes: Top-level statement nodes

        Returns:
            The (possibly replaced) node list
        """
        logger.debug(
            "Traversing %d top-level nodes with %d visitors",
            len(nodes), len(self.visitors)
        )

        for visitor in self.visitors:
            result = visitor.before_traverse(nodes)
            if result is not None:
                nodes = result

        nodes = self._traverse_list(nodes)

        for visitor in self.visitors:
            result = visitor.after_traverse(nodes)
            if result is not None:
                nodes = result

        return nodes

    def _traverse_list(self, nodes: List[Node]) -> List[Node]:
        for i, node in enumerate(nodes):
            for visitor in self.visitors:
                replacement = visitor.enter_node(node)
                if replacement is not None:
                    node = replacement

            children = node.children()
            if children:
                # Replacements are written back into the node's own list
                children[:] = self._traverse_list(children)

            for visitor in self.visitors:
                replacement = visitor.leave_node(node)
                if replacement is not None:
                    node = replacement

            nodes[i] = node
        return nodes
