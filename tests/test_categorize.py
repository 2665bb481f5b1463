"""
Tests for Categorize — Symbol bucketing visitor.

Tests validate:
- One bucket per declaration kind, namespaced names as given
- Natural, case-insensitive, copy-returning readers
- const statements with several entries
- define() name extraction, including the interpolated-name skip
- Fatal errors for unresolved names, empty const statements, bad define()
- Reset rules across traversals, including interface carry-over

All tests build nodes directly; no PHP grammar required.
"""

import pytest

from scoper_excludes.core.categorize import Categorize, SymbolLists
from scoper_excludes.core.nodes import Arg, Block, ConstStatement, NodeKind
from scoper_excludes.core.traverser import NodeTraverser
from scoper_excludes.errors import (
    CategorizeError,
    DefineNameError,
    EmptyConstantDeclarationError,
    MissingNamespacedNameError,
)

from tests.factories import (
    call,
    class_node,
    concat,
    const_statement,
    define_call,
    function_node,
    interface_node,
    interpolated,
    namespace,
    number,
    other,
    string,
    trait_node,
)


# =============================================================================
# Bucketing
# =============================================================================

class TestBuckets:
    """Each declaration kind lands in exactly one bucket."""

    def test_empty_tree(self, run):
        """No declarations gives five empty lists."""
        result = run([])

        assert result.classes() == []
        assert result.interfaces() == []
        assert result.functions() == []
        assert result.traits() == []
        assert result.constants() == []

    def test_irrelevant_nodes_ignored(self, run):
        """Blocks and unrelated calls add nothing."""
        result = run([
            Block(node_type="if_statement"),
            call("printf", string("%s")),
        ])

        assert result.symbols().is_empty()

    def test_each_kind_in_its_bucket(self, run):
        """Classes, interfaces, functions and traits are kept apart."""
        result = run([
            class_node("Foo", "App\\Foo"),
            interface_node("FooInterface", "App\\FooInterface"),
            function_node("helper", "App\\helper"),
            trait_node("FooTrait", "App\\FooTrait"),
        ])

        assert result.classes() == ["App\\Foo"]
        assert result.interfaces() == ["App\\FooInterface"]
        assert result.functions() == ["App\\helper"]
        assert result.traits() == ["App\\FooTrait"]
        assert result.constants() == []

    def test_nested_declarations_visited(self, run):
        """Declarations inside namespaces and function bodies are collected."""
        result = run([
            namespace("App", [
                Block(node_type="if_statement", stmts=[
                    function_node("inner", "App\\inner"),
                ]),
                function_node("outer", "App\\outer", stmts=[
                    function_node("nested", "App\\nested"),
                ]),
            ]),
        ])

        assert result.functions() == ["App\\inner", "App\\nested", "App\\outer"]

    def test_all_class_names_returned(self, run):
        """N distinct classes give exactly N names."""
        names = [f"Vendor\\Class{i}" for i in range(25)]
        result = run([class_node(n, n) for n in reversed(names)])

        assert result.classes() == names

    def test_duplicates_kept(self, run):
        """The same name declared twice stays twice."""
        result = run([
            function_node("dup", "dup"),
            function_node("dup", "dup"),
        ])

        assert result.functions() == ["dup", "dup"]

    def test_leave_node_returns_none(self, categorize):
        """The visitor never replaces nodes."""
        assert categorize.leave_node(class_node("Foo", "Foo")) is None
        assert categorize.before_traverse([]) is None


# =============================================================================
# Readers
# =============================================================================

class TestReaders:
    """Readers return sorted copies."""

    def test_natural_case_insensitive_order(self, run):
        """Item1 < item2 < Item10."""
        result = run([
            class_node("Item10", "Item10"),
            class_node("item2", "item2"),
            class_node("Item1", "Item1"),
        ])

        assert result.classes() == ["Item1", "item2", "Item10"]

    def test_reader_returns_copy(self, run):
        """Mutating a returned list does not affect the bucket."""
        result = run([class_node("B", "B"), class_node("A", "A")])

        first = result.classes()
        first.append("Z")

        assert result.classes() == ["A", "B"]

    def test_insertion_order_preserved_internally(self, run):
        """Sorting a read does not reorder later reads of new names."""
        categorize = run([class_node("B", "B"), class_node("A", "A")])
        categorize.classes()
        categorize.leave_node(class_node("C", "C"))

        assert categorize.classes() == ["A", "B", "C"]

    def test_symbols_bundle(self, run):
        """symbols() bundles all five readers."""
        result = run([
            class_node("Foo", "Foo"),
            const_statement("BAR"),
        ]).symbols()

        assert isinstance(result, SymbolLists)
        assert result.to_dict() == {
            "classes": ["Foo"],
            "interfaces": [],
            "functions": [],
            "traits": [],
            "constants": ["BAR"],
        }
        assert not result.is_empty()


# =============================================================================
# Constants
# =============================================================================

class TestConstStatements:
    """const statements contribute every entry."""

    def test_multiple_constants_in_one_statement(self, run):
        """const A = 1, B = 2; yields both."""
        result = run([const_statement("App\\A", "App\\B")])

        assert result.constants() == ["App\\A", "App\\B"]

    def test_empty_const_statement_fails(self, run):
        """A const statement without entries is fatal."""
        with pytest.raises(EmptyConstantDeclarationError, match="has no constants"):
            run([ConstStatement(consts=[])])

    def test_unresolved_const_fails(self, run):
        """Every entry needs its namespaced name."""
        with pytest.raises(MissingNamespacedNameError, match="Const node"):
            run([const_statement("A", resolve=False)])

    def test_unresolved_entry_leaves_bucket_untouched(self, categorize):
        """A bad entry does not leave its valid siblings behind."""
        statement = const_statement("A", "B")
        statement.consts[1].namespaced_name = None

        with pytest.raises(MissingNamespacedNameError):
            categorize.leave_node(statement)

        assert categorize.constants() == []


# =============================================================================
# define()
# =============================================================================

class TestDefine:
    """define() calls declare constants."""

    def test_string_literal_name(self, run):
        """define("FOO", 1) yields FOO."""
        result = run([define_call(string("FOO"), number("1"))])

        assert result.constants() == ["FOO"]

    def test_define_not_namespaced(self, run):
        """define() names are global regardless of the surrounding namespace."""
        result = run([namespace("App", [define_call(string("FOO"), number("1"))])])

        assert result.constants() == ["FOO"]

    def test_interpolated_name_skipped(self, run):
        """define("FOO_{$x}", 1) is skipped without error."""
        result = run([define_call(interpolated('"FOO_{$x}"'), number("1"))])

        assert result.constants() == []

    def test_no_arguments_fails(self, run):
        """define() with no arguments is fatal."""
        with pytest.raises(DefineNameError, match="has no constant name"):
            run([define_call()])

    def test_number_name_coerced(self, run):
        """Numeric literals are converted to their string form."""
        result = run([define_call(number("0x1A"), number("1"))])

        assert result.constants() == ["26"]

    def test_concatenated_name(self, run):
        """'A_' . 'B' is resolved statically."""
        result = run([define_call(concat(string("PREFIX_"), string("NAME")), number("1"))])

        assert result.constants() == ["PREFIX_NAME"]

    def test_unsupported_expression_fails_with_cause(self, run):
        """Other expressions are fatal and keep the cause's message."""
        with pytest.raises(DefineNameError) as exc_info:
            run([define_call(other("name", "SOME_CONST"), number("1"))])

        message = str(exc_info.value)
        assert message.startswith("define() declaration has no constant name.\n")
        assert "SOME_CONST" in message
        assert exc_info.value.__cause__ is not None

    def test_concat_with_variable_fails(self, run):
        """A concatenation with a non-literal operand is fatal."""
        with pytest.raises(DefineNameError):
            run([define_call(concat(string("A_"), other("variable_name", "$x")), number("1"))])

    def test_other_functions_ignored(self, run):
        """Only calls to define itself count."""
        result = run([
            call("defined", string("FOO")),
            call("Foo\\define", string("BAR"), number("1")),
            call("DEFINE", string("BAZ"), number("1")),
        ])

        assert result.constants() == []

    def test_named_constant_name_argument(self, run):
        """define(value: 1, constant_name: "FOO") uses the named argument."""
        statement = define_call()
        statement.expr.args = [
            Arg(number("1"), name="value"),
            Arg(string("FOO"), name="constant_name"),
        ]

        result = run([statement])

        assert result.constants() == ["FOO"]

    def test_fully_qualified_define(self, run):
        """\\define(...) is the same function."""
        result = run([call("\\define", string("FOO"), number("1"))])

        assert result.constants() == ["FOO"]

    def test_errors_are_runtime_errors(self):
        """Callers catching RuntimeError still see categorizer failures."""
        assert issubclass(CategorizeError, RuntimeError)


# =============================================================================
# Preconditions
# =============================================================================

class TestMissingNames:
    """Declarations must arrive resolved."""

    @pytest.mark.parametrize("factory,label", [
        (class_node, "Class"),
        (interface_node, "Interface"),
        (function_node, "Function"),
        (trait_node, "Trait"),
    ])
    def test_unresolved_declaration_fails(self, run, factory, label):
        """Missing namespaced name is fatal for every declaration kind."""
        with pytest.raises(MissingNamespacedNameError, match=f"{label} node"):
            run([factory("Foo")])

    def test_failure_does_not_touch_bucket(self, run, categorize):
        """The failing node adds nothing before raising."""
        with pytest.raises(MissingNamespacedNameError):
            run([class_node("Good", "Good"), class_node("Bad")])

        assert "Bad" not in categorize.classes()

    def test_traversal_aborts(self, run, categorize):
        """Nodes after the failing one are never visited."""
        with pytest.raises(MissingNamespacedNameError):
            run([class_node("Bad"), function_node("later", "later")])

        assert categorize.functions() == []


# =============================================================================
# Reset between traversals
# =============================================================================

class TestReset:
    """before_traverse opens a fresh accumulation scope."""

    def _first_and_second(self, categorize):
        traverser = NodeTraverser([categorize])
        traverser.traverse([
            class_node("First", "First"),
            interface_node("FirstInterface", "FirstInterface"),
            function_node("first", "first"),
            trait_node("FirstTrait", "FirstTrait"),
            const_statement("FIRST"),
        ])
        traverser.traverse([
            class_node("Second", "Second"),
            interface_node("SecondInterface", "SecondInterface"),
        ])
        return categorize

    def test_four_buckets_reset(self):
        """classes, functions, traits and constants start empty each pass."""
        categorize = self._first_and_second(Categorize())

        assert categorize.classes() == ["Second"]
        assert categorize.functions() == []
        assert categorize.traits() == []
        assert categorize.constants() == []

    def test_interfaces_carry_over_by_default(self):
        """Interfaces from earlier passes remain unless configured otherwise."""
        categorize = self._first_and_second(Categorize())

        assert categorize.interfaces() == ["FirstInterface", "SecondInterface"]

    def test_reset_interfaces_option(self):
        """reset_interfaces=True clears all five buckets."""
        categorize = self._first_and_second(Categorize(reset_interfaces=True))

        assert categorize.interfaces() == ["SecondInterface"]

    def test_kind_dispatch_covers_declarations(self, categorize):
        """Every declaration kind has a handler."""
        for kind in (NodeKind.CLASS, NodeKind.INTERFACE, NodeKind.FUNCTION,
                     NodeKind.TRAIT, NodeKind.CONST, NodeKind.EXPRESSION):
            assert kind in categorize._handlers
