"""
PhpTreeBuilder — Convert a tree-sitter PHP syntax tree into the node model.

The concrete syntax tree from tree-sitter is much richer than what the
categorizer needs. The builder keeps:
- namespaces (statement-form namespaces swallow the statements after them)
- use imports
- class / interface / trait / function declarations
- namespace-level const statements (class constants are dropped)
- expression statements, with function calls and literal arguments
- every other statement only as a Block around its nested declarations

Names are left unresolved; NameResolver fills them in during traversal.
"""

import re
from typing import TYPE_CHECKING, List, Optional

from ..nodes import (
    Arg,
    Block,
    Concat,
    ConstElement,
    ConstStatement,
    Declaration,
    ExpressionStatement,
    FuncCall,
    InterpolatedString,
    Name,
    Namespace,
    NodeKind,
    NumberLiteral,
    OtherExpr,
    StringLiteral,
    UseItem,
    UseStatement,
)

if TYPE_CHECKING:
    from tree_sitter import Node as TSNode


DECLARATION_TYPES = {
    'class_declaration': NodeKind.CLASS,
    'interface_declaration': NodeKind.INTERFACE,
    'trait_declaration': NodeKind.TRAIT,
    'function_definition': NodeKind.FUNCTION,
}

NAME_TYPES = ('name', 'qualified_name', 'namespace_name', 'relative_name')

# Bodies in which `const` declares class constants, not global ones
CLASS_BODY_TYPES = ('declaration_list', 'enum_declaration_list')

# Parts of a double-quoted string that carry no interpolation
STRING_PART_TYPES = ('string', 'string_content', 'string_value', 'escape_sequence')

# Statements kept as Blocks when they contain declarations
BLOCK_TYPES = ('enum_declaration',)

_SINGLE_QUOTE_ESCAPE_RE = re.compile(r"\\([\\'])")
_DOUBLE_QUOTE_ESCAPE_RE = re.compile(
    r'\\(?:([nrtvef\\$"])|([0-7]{1,3})|x([0-9A-Fa-f]{1,2})|u\{([0-9A-Fa-f]+)\})'
)
# Heredoc bodies decode the double-quote escapes except \"
_HEREDOC_ESCAPE_RE = re.compile(
    r'\\(?:([nrtvef\\$])|([0-7]{1,3})|x([0-9A-Fa-f]{1,2})|u\{([0-9A-Fa-f]+)\})'
)
_HEREDOC_RE = re.compile(
    r'\A[bB]?<<<[ \t]*(["\']?)([^\W\d]\w*)\1\r?\n(.*)\Z',
    re.DOTALL,
)
_SIMPLE_ESCAPES = {
    'n': '\n', 'r': '\r', 't': '\t', 'v': '\v',
    'e': '\x1b', 'f': '\f', '\\': '\\', '$': '$', '"': '"',
}


class PhpTreeBuilder:
    """
    Builds node-model statements from one parsed PHP source.

    Args:
        source: The exact bytes handed to the tree-sitter parser
    """

    def __init__(self, source: bytes):
        self.source = source

    def build(self, root: 'TSNode') -> List:
        """
        Convert the program node into top-level statements.

        Statement-form `namespace Foo;` opens a Namespace that collects
        every following statement until the next namespace declaration.
        """
        nodes: List = []
        current: Optional[Namespace] = None

        for child in root.named_children:
            if child.type == 'namespace_definition':
                namespace = self._namespace(child)
                nodes.append(namespace)
                # Braced namespaces close themselves
                current = namespace if child.child_by_field_name('body') is None else None
                continue

            converted = self._convert(child, root)
            if current is not None:
                current.stmts.extend(converted)
            else:
                nodes.extend(converted)

        return nodes

    # -------------------------------------------------------------------------
    # Statements
    # -------------------------------------------------------------------------

    def _collect(self, node: 'TSNode') -> List:
        """Convert the named children of node, flattening unknown wrappers."""
        nodes: List = []
        for child in node.named_children:
            nodes.extend(self._convert(child, node))
        return nodes

    def _convert(self, node: 'TSNode', parent: 'TSNode') -> List:
        node_type = node.type

        if node_type in DECLARATION_TYPES:
            return [self._declaration(node)]
        if node_type == 'const_declaration':
            if parent.type in CLASS_BODY_TYPES:
                return []
            return [self._const_statement(node)]
        if node_type == 'namespace_use_declaration':
            return [self._use_statement(node)]
        if node_type == 'expression_statement':
            return [self._expression_statement(node)]
        if node_type in BLOCK_TYPES:
            stmts = self._collect(node)
            return [Block(node_type=node_type, stmts=stmts, line=_line(node))] if stmts else []

        return self._collect(node)

    def _namespace(self, node: 'TSNode') -> Namespace:
        name_node = node.child_by_field_name('name')
        name = Name.parse(self._text(name_node)) if name_node is not None else None
        body = node.child_by_field_name('body')
        stmts = self._collect(body) if body is not None else []
        return Namespace(name=name, stmts=stmts, line=_line(node))

    def _declaration(self, node: 'TSNode') -> Declaration:
        name_node = node.child_by_field_name('name')
        return Declaration(
            kind=DECLARATION_TYPES[node.type],
            name=self._text(name_node) if name_node is not None else "",
            stmts=self._collect(node),
            line=_line(node),
        )

    def _const_statement(self, node: 'TSNode') -> ConstStatement:
        consts = []
        for element in node.named_children:
            if element.type != 'const_element':
                continue
            name_node = next(
                (c for c in element.named_children if c.type == 'name'), None
            )
            if name_node is not None:
                consts.append(ConstElement(name=self._text(name_node), line=_line(element)))
        return ConstStatement(consts=consts, line=_line(node))

    def _use_statement(self, node: 'TSNode') -> UseStatement:
        use_type = _use_type(node) or "normal"
        uses: List[UseItem] = []
        prefix: Optional[Name] = None

        for child in node.named_children:
            if child.type == 'namespace_name':
                # Group form: use Foo\{Bar, Baz}
                prefix = Name.parse(self._text(child))
            elif child.type == 'namespace_use_clause':
                uses.append(self._use_item(child, None))
            elif child.type == 'namespace_use_group':
                for clause in child.named_children:
                    if clause.type in ('namespace_use_clause', 'namespace_use_group_clause'):
                        uses.append(self._use_item(clause, prefix))
                        clause_type = _use_type(clause)
                        if clause_type:
                            # Mixed groups are rare; the last explicit type wins
                            use_type = clause_type

        return UseStatement(type=use_type, uses=uses, line=_line(node))

    def _use_item(self, clause: 'TSNode', prefix: Optional[Name]) -> UseItem:
        name: Optional[Name] = None
        alias: Optional[str] = None

        alias_node = clause.child_by_field_name('alias')
        for child in clause.named_children:
            if alias_node is not None and child == alias_node:
                continue
            if child.type in NAME_TYPES and name is None:
                name = Name.parse(self._text(child))
            elif child.type == 'namespace_aliasing_clause':
                alias_name = next(
                    (c for c in child.named_children if c.type == 'name'), None
                )
                if alias_name is not None:
                    alias = self._text(alias_name)
        if alias_node is not None:
            alias = self._text(alias_node)

        parts = name.parts if name is not None else [""]
        if prefix is not None:
            parts = prefix.parts + parts
        return UseItem(name=Name(parts, "fully_qualified"), alias=alias)

    def _expression_statement(self, node: 'TSNode') -> ExpressionStatement:
        expr_node = node.named_children[0] if node.named_children else None
        if expr_node is None:
            return ExpressionStatement(expr=OtherExpr('empty'), line=_line(node))
        return ExpressionStatement(
            expr=self._expression(expr_node),
            stmts=self._collect(expr_node),
            line=_line(node),
        )

    # -------------------------------------------------------------------------
    # Expressions
    # -------------------------------------------------------------------------

    def _expression(self, node: 'TSNode'):
        node_type = node.type

        if node_type == 'function_call_expression':
            return self._call(node)
        if node_type == 'string':
            return StringLiteral(self._single_quoted(node))
        if node_type == 'encapsed_string':
            if _has_interpolation(node):
                return InterpolatedString(self._text(node))
            return StringLiteral(self._double_quoted(node))
        if node_type in ('heredoc', 'nowdoc'):
            if node_type == 'heredoc' and _has_interpolation_deep(node):
                return InterpolatedString(self._text(node))
            value = _heredoc_value(self._text(node))
            if value is not None:
                return StringLiteral(value)
        if node_type in ('integer', 'float'):
            return NumberLiteral(self._text(node))
        if node_type == 'binary_expression':
            operator = node.child_by_field_name('operator')
            left = node.child_by_field_name('left')
            right = node.child_by_field_name('right')
            if operator is not None and operator.type == '.' and left is not None and right is not None:
                return Concat(self._expression(left), self._expression(right))
        if node_type == 'parenthesized_expression' and node.named_children:
            return self._expression(node.named_children[0])

        return OtherExpr(node_type, self._text(node))

    def _call(self, node: 'TSNode') -> FuncCall:
        function = node.child_by_field_name('function')
        if function is not None and function.type in NAME_TYPES:
            name = Name.parse(self._text(function))
        elif function is not None:
            name = self._expression(function)
        else:
            name = OtherExpr('missing')

        args: List[Arg] = []
        arguments = node.child_by_field_name('arguments')
        if arguments is not None:
            for argument in arguments.named_children:
                if argument.type == 'argument':
                    args.append(self._argument(argument))
        return FuncCall(name=name, args=args)

    def _argument(self, node: 'TSNode') -> Arg:
        name_node = node.child_by_field_name('name')
        value_node = node.named_children[-1]
        return Arg(
            value=self._expression(value_node),
            name=self._text(name_node) if name_node is not None and name_node != value_node else None,
        )

    # -------------------------------------------------------------------------
    # Text helpers
    # -------------------------------------------------------------------------

    def _text(self, node: 'TSNode') -> str:
        return self.source[node.start_byte:node.end_byte].decode('utf-8', errors='replace')

    def _single_quoted(self, node: 'TSNode') -> str:
        body = _strip_quotes(self._text(node), "'")
        return _SINGLE_QUOTE_ESCAPE_RE.sub(r'\1', body)

    def _double_quoted(self, node: 'TSNode') -> str:
        body = _strip_quotes(self._text(node), '"')
        return _DOUBLE_QUOTE_ESCAPE_RE.sub(_decode_escape, body)


def _line(node: 'TSNode') -> int:
    return node.start_point[0] + 1  # tree-sitter is 0-indexed


def _use_type(node: 'TSNode') -> Optional[str]:
    type_node = node.child_by_field_name('type')
    if type_node is not None:
        return type_node.type.lower()
    for child in node.children:
        if child.type in ('function', 'const'):
            return child.type
    return None


def _has_interpolation(node: 'TSNode') -> bool:
    return any(child.type not in STRING_PART_TYPES for child in node.named_children)


def _has_interpolation_deep(node: 'TSNode') -> bool:
    for child in node.named_children:
        if child.type in ('variable_name', 'member_access_expression', 'subscript_expression',
                          'dynamic_variable_name', 'function_call_expression'):
            return True
        if _has_interpolation_deep(child):
            return True
    return False


def _strip_quotes(text: str, quote: str) -> str:
    if text[:1] in ('b', 'B'):
        text = text[1:]
    if text.startswith(quote) and text.endswith(quote) and len(text) >= 2:
        return text[1:-1]
    return text


def _heredoc_value(text: str) -> Optional[str]:
    """
    Static value of a heredoc or nowdoc without interpolation.

    The closing marker's indentation is removed from every body line.
    Nowdoc bodies are taken verbatim, heredoc bodies have escapes decoded.
    Returns None when the text does not have the expected shape.
    """
    match = _HEREDOC_RE.match(text)
    if match is None:
        return None
    quote, identifier, rest = match.groups()

    lines = rest.split('\n')
    closing = lines.pop()
    if closing.strip() != identifier:
        return None

    indent = closing[:len(closing) - len(closing.lstrip(' \t'))]
    body = '\n'.join(line[len(indent):] if line.startswith(indent) else line for line in lines)
    if body.endswith('\r'):
        body = body[:-1]

    if quote == "'":
        return body
    return _HEREDOC_ESCAPE_RE.sub(_decode_escape, body)


def _decode_escape(match: 're.Match') -> str:
    simple, octal, hex_value, codepoint = match.groups()
    if simple is not None:
        return _SIMPLE_ESCAPES[simple]
    if octal is not None:
        return chr(int(octal, 8) & 0xFF)
    if hex_value is not None:
        return chr(int(hex_value, 16))
    return chr(int(codepoint, 16))
