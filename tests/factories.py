"""
Test Node Factory — Build node-model trees without a PHP grammar.

Lets categorizer and resolver tests describe trees declaratively instead
of going through tree-sitter.

Usage:
    nodes = [
        namespace("App", [class_node("Foo"), define_call(string("BAR"))]),
    ]
"""

from typing import List, Optional

from scoper_excludes.core.nodes import (
    Arg,
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


def resolved(name: str) -> Name:
    """A fully-qualified Name from 'App\\Foo' style text."""
    return Name(name.split("\\"), "fully_qualified")


def declaration(kind: NodeKind, name: str, resolved_name: Optional[str] = None, stmts=None) -> Declaration:
    return Declaration(
        kind=kind,
        name=name.split("\\")[-1],
        stmts=list(stmts or []),
        namespaced_name=resolved(resolved_name) if resolved_name else None,
    )


def class_node(name: str, resolved_name: Optional[str] = None, stmts=None) -> Declaration:
    return declaration(NodeKind.CLASS, name, resolved_name, stmts)


def interface_node(name: str, resolved_name: Optional[str] = None) -> Declaration:
    return declaration(NodeKind.INTERFACE, name, resolved_name)


def function_node(name: str, resolved_name: Optional[str] = None, stmts=None) -> Declaration:
    return declaration(NodeKind.FUNCTION, name, resolved_name, stmts)


def trait_node(name: str, resolved_name: Optional[str] = None) -> Declaration:
    return declaration(NodeKind.TRAIT, name, resolved_name)


def const_statement(*names: str, resolve: bool = True) -> ConstStatement:
    return ConstStatement(consts=[
        ConstElement(
            name=name.split("\\")[-1],
            namespaced_name=resolved(name) if resolve else None,
        )
        for name in names
    ])


def namespace(name: Optional[str], stmts: List) -> Namespace:
    return Namespace(name=Name.parse(name) if name else None, stmts=stmts)


def use_function(name: str, alias: Optional[str] = None) -> UseStatement:
    return UseStatement(type="function", uses=[UseItem(resolved(name), alias)])


def use_class(name: str, alias: Optional[str] = None) -> UseStatement:
    return UseStatement(type="normal", uses=[UseItem(resolved(name), alias)])


def call(function: str, *args) -> ExpressionStatement:
    return ExpressionStatement(
        expr=FuncCall(name=Name.parse(function), args=[Arg(value) for value in args])
    )


def define_call(*args) -> ExpressionStatement:
    return call("define", *args)


def string(value: str) -> StringLiteral:
    return StringLiteral(value)


def interpolated(raw: str) -> InterpolatedString:
    return InterpolatedString(raw)


def number(raw: str) -> NumberLiteral:
    return NumberLiteral(raw)


def concat(left, right) -> Concat:
    return Concat(left, right)


def other(node_type: str, raw: str = "") -> OtherExpr:
    return OtherExpr(node_type, raw)
