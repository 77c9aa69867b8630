import pytest
from graph_adt.node import Node, NodeStore
from graph_adt.exceptions import NonExistentNodeError


class TestNodeStore:
    def test_insert_creates_unmarked_isolated_node(self):
        store = NodeStore()
        node = store.insert("A")
        assert isinstance(node, Node)
        assert node.value == "A"
        assert node.adjacents == set()
        assert node.marked is False
        assert "A" in store
        assert len(store) == 1

    def test_insert_duplicate_returns_none(self):
        store = NodeStore()
        first = store.insert("A")
        assert store.insert("A") is None
        assert len(store) == 1
        assert store.get("A") is first

    def test_get_missing_value(self):
        store = NodeStore()
        assert store.get("Z") is None

    def test_getitem_missing_value_raises(self):
        store = NodeStore()
        with pytest.raises(NonExistentNodeError, match="At least one of those nodes doesn't exist: Z"):
            store["Z"]

    def test_owns(self):
        store = NodeStore()
        other = NodeStore()
        node = store.insert("A")
        foreign = other.insert("A")
        assert store.owns(node)
        assert not store.owns(foreign)
        assert not store.owns(Node("A"))

    def test_iteration(self):
        store = NodeStore()
        for value in (1, 2, 3):
            store.insert(value)
        assert set(store) == {1, 2, 3}
        assert {node.value for node in store.nodes()} == {1, 2, 3}

    def test_clear_is_idempotent(self):
        store = NodeStore()
        a = store.insert("A")
        b = store.insert("B")
        a.adjacents.add("B")
        b.adjacents.add("A")
        store.clear()
        assert len(store) == 0
        assert a.adjacents == set()
        assert b.adjacents == set()
        store.clear()
        assert len(store) == 0

    def test_nodes_compare_by_identity(self):
        assert Node("A") != Node("A")
        node = Node("A")
        assert node == node
        assert repr(node) == "Node('A')"
