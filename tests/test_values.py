"""Tests for the s-expression value model."""

import dataclasses

import pytest

from pcb_sexpr.values import Atom, QuotedString, SExpr


class TestScalarWrappers:
    """Tests for Atom and QuotedString."""

    def test_atom_value(self):
        """Atom keeps its text."""
        assert Atom("resistor").value == "resistor"

    def test_wrappers_are_immutable(self):
        """Atom and QuotedString cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Atom("a").value = "b"
        with pytest.raises(dataclasses.FrozenInstanceError):
            QuotedString("a").value = "b"

    def test_kinds_are_distinct(self):
        """Atom and QuotedString with the same text are not equal."""
        assert Atom("x") != QuotedString("x")
        assert Atom("x") == Atom("x")


class TestSExprConstruction:
    """Tests for building nodes."""

    def test_name_and_values(self):
        """Constructor takes a name and initial values."""
        node = SExpr("at", 1, 2, 90)
        assert node.name == "at"
        assert node.values == [1, 2, 90]

    def test_create(self):
        """create() is equivalent to the constructor."""
        assert SExpr.create("xy", 1, 2) == SExpr("xy", 1, 2)

    def test_empty(self):
        """A node may have no values."""
        node = SExpr("lib_symbols")
        assert len(node) == 0
        assert list(node) == []

    def test_equality(self):
        """Nodes compare by name and values."""
        assert SExpr("a", Atom("b"), SExpr("c", 1)) == SExpr("a", Atom("b"), SExpr("c", 1.0))
        assert SExpr("a", 1) != SExpr("b", 1)
        assert SExpr("a", Atom("b")) != SExpr("a", QuotedString("b"))

    def test_repr(self):
        """repr shows the name and child count."""
        assert repr(SExpr("wire", 1, 2)) == "SExpr(name='wire', values=[2 items])"


class TestGetStringValue:
    """Tests for get_string_value()."""

    @pytest.fixture
    def node(self):
        return SExpr("p", "raw", Atom("atom"), QuotedString("quoted"), 1.5, SExpr("x"), None)

    def test_string_kinds(self, node):
        """Raw strings, atoms and quoted strings return their text."""
        assert node.get_string_value(0) == "raw"
        assert node.get_string_value(1) == "atom"
        assert node.get_string_value(2) == "quoted"

    def test_other_kinds(self, node):
        """Numbers, nodes and None return None."""
        assert node.get_string_value(3) is None
        assert node.get_string_value(4) is None
        assert node.get_string_value(5) is None

    def test_out_of_range(self, node):
        """Out-of-range indices return None."""
        assert node.get_string_value(6) is None
        assert node.get_string_value(-1) is None


class TestMutation:
    """Tests for add, remove_where and child."""

    def test_add_returns_self(self):
        """add() appends and allows chaining."""
        node = SExpr("layers")
        result = node.add(Atom("F.Cu")).add(Atom("B.Cu"), Atom("In1.Cu"))
        assert result is node
        assert node.values == [Atom("F.Cu"), Atom("B.Cu"), Atom("In1.Cu")]

    def test_remove_where_by_value(self):
        """remove_where() drops matching values and keeps order."""
        node = SExpr("n", 1, Atom("a"), 2, Atom("b"), 3)
        result = node.remove_where(lambda v, i: isinstance(v, Atom))
        assert result is node
        assert node.values == [1, 2, 3]

    def test_remove_where_by_index(self):
        """The predicate receives original indices."""
        node = SExpr("n", "a", "b", "c", "d")
        node.remove_where(lambda v, i: i % 2 == 1)
        assert node.values == ["a", "c"]

    def test_remove_where_keeps_live_list(self):
        """values still refers to the node's children after removal."""
        node = SExpr("n", 1, 2, 3)
        values = node.values
        node.remove_where(lambda v, i: v == 2)
        assert values == [1, 3]
        assert node.values is values

    def test_remove_where_nothing_matches(self):
        """No match leaves the node unchanged."""
        node = SExpr("n", 1, 2)
        node.remove_where(lambda v, i: False)
        assert node.values == [1, 2]

    def test_child_returns_child(self):
        """child() appends a new node and returns it."""
        root = SExpr("symbol")
        prop = root.child("property", QuotedString("Value"), QuotedString("10k"))
        assert prop is not root
        assert root.values[-1] is prop
        assert prop.name == "property"

    def test_fluent_building(self):
        """child() supports building downward."""
        root = SExpr("wire")
        root.child("pts").add(SExpr("xy", 0, 0), SExpr("xy", 10, 0))
        root.child("uuid", QuotedString("abc"))
        assert root.to_string() == '(wire (pts (xy 0 0) (xy 10 0)) (uuid "abc"))'


class TestFind:
    """Tests for find_child and find_children."""

    @pytest.fixture
    def tree(self):
        return SExpr(
            "root",
            SExpr("a", 1),
            Atom("a"),
            SExpr("b", SExpr("a", 2), SExpr("c")),
            SExpr("a", 3),
        )

    def test_find_child_first_match(self, tree):
        """find_child returns the first direct match."""
        assert tree.find_child("a") == SExpr("a", 1)

    def test_find_child_is_shallow(self, tree):
        """Grandchildren are not searched."""
        assert tree.find_child("c") is None

    def test_find_child_ignores_atoms(self, tree):
        """An atom with the same text is not a match."""
        assert tree.find_child("missing") is None
        assert all(isinstance(n, SExpr) for n in tree.find_children("a"))

    def test_find_children_order(self, tree):
        """find_children keeps insertion order and skips grandchildren."""
        assert [n.values for n in tree.find_children("a")] == [[1], [3]]

    def test_find_children_none(self, tree):
        """No match returns an empty list."""
        assert tree.find_children("zzz") == []


class TestEntryPoints:
    """Tests for the serialize/parse methods on SExpr."""

    def test_to_string_and_str(self):
        """to_string() and str() serialize with defaults."""
        node = SExpr("xy", 1, 2)
        assert node.to_string() == "(xy 1 2)"
        assert str(node) == "(xy 1 2)"

    def test_to_string_overrides(self):
        """to_string() accepts option overrides."""
        node = SExpr("a", SExpr("b", 1))
        assert node.to_string(compact=False) == "(a\n  (b 1))"

    def test_static_serialize(self):
        """serialize() works for non-node values."""
        assert SExpr.serialize(QuotedString("x")) == '"x"'
        assert SExpr.serialize(2.5) == "2.5"

    def test_parse(self):
        """parse() returns a node."""
        assert SExpr.parse("(a b)") == SExpr("a", Atom("b"))
