import logging
import sys
from typing import Any, Dict, Hashable, Iterator, List, Optional, Set, TextIO, Tuple, Union

from .algorithms import shortest_path
from .exceptions import NonExistentNodeError
from .node import Node, NodeStore

logger = logging.getLogger(__name__)


class Graph:
    """
    An undirected graph whose nodes are identified by unique, hashable values.

    The graph need not be connected. Every edge is recorded on both of its
    endpoints, and adding an edge that already exists changes nothing.
    Nodes and edges are never removed individually; ``clear()`` drops everything.
    """

    def __init__(self) -> None:
        self._store = NodeStore()

    def insert(self, value: Hashable) -> Optional[Node]:
        """
        Adds an isolated node holding ``value``.

        Args:
            value: The value of the node. Must be hashable and printable.

        Returns:
            A handle to the new node, or None if the value is already present.
            A duplicate leaves the graph untouched.
        """
        return self._store.insert(value)

    def connect(self, first: Union[Node, Hashable], second: Union[Node, Hashable]) -> None:
        """
        Adds an undirected edge between two nodes.

        Both arguments may be node handles returned by ``insert`` or plain
        values. Connecting an already connected pair is a no-op.

        Args:
            first: A node handle or value.
            second: A node handle or value.

        Raises:
            NonExistentNodeError: If either value is not in the graph, or a
                handle belongs to another graph. The graph is left unmodified.
        """
        first_node = self._resolve(first)
        second_node = self._resolve(second)
        missing = [
            arg.value if isinstance(arg, Node) else arg
            for arg, node in ((first, first_node), (second, second_node))
            if node is None
        ]
        if missing:
            raise NonExistentNodeError(*missing)
        self._connect_nodes(first_node, second_node)

    def _resolve(self, item: Union[Node, Hashable]) -> Optional[Node]:
        if isinstance(item, Node):
            return item if self._store.owns(item) else None
        return self._store.get(item)

    @staticmethod
    def _connect_nodes(first: Node, second: Node) -> None:
        first.adjacents.add(second.value)
        second.adjacents.add(first.value)

    def unmark_all(self) -> None:
        """Clears the traversal marker on every node."""
        for node in self._store.nodes():
            node.marked = False

    def dump(self) -> str:
        """
        Renders each node followed by its neighbours, one node per line,
        e.g. ``"A: B D "``. Neither line nor neighbour order is guaranteed.
        """
        lines = []
        for node in self._store.nodes():
            neighbours = "".join(f"{value} " for value in node.adjacents)
            lines.append(f"{node.value}: {neighbours}")
        return "\n".join(lines)

    def print(self, file: Optional[TextIO] = None) -> None:
        """Writes ``dump()`` to ``file`` (standard output by default)."""
        out = file if file is not None else sys.stdout
        out.write(self.dump() + "\n")

    def copy(self) -> "Graph":
        """
        Returns an independent graph with the same values and edges.

        Nothing is shared with the source: mutating either graph afterwards
        never affects the other.
        """
        clone = Graph()
        clone._copy_other(self)
        return clone

    def assign(self, other: "Graph") -> "Graph":
        """
        Replaces the contents of this graph with a copy of ``other``.
        Assigning a graph to itself does nothing.
        """
        if other is not self:
            self.clear()
            self._copy_other(other)
        return self

    def _copy_other(self, other: "Graph") -> None:
        # Every node must exist before any edge can be re-created by value.
        for value in other.get_all_nodes():
            self.insert(value)
        for node in other._store.nodes():
            for neighbour in node.adjacents:
                self.connect(node.value, neighbour)
        logger.debug(
            "Copied graph with %d nodes and %d edges",
            self.get_nodes_count(), self.get_edges_count()
        )

    def __copy__(self) -> "Graph":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Graph":
        clone = self.copy()
        memo[id(self)] = clone
        return clone

    def clear(self) -> None:
        """Releases every node. Safe to call repeatedly."""
        self._store.clear()

    def shortest_path(self, start: Hashable, end: Hashable) -> List[Hashable]:
        """
        Finds a path with the fewest edges from ``start`` to ``end``.

        Returns:
            The values along the path, both endpoints included.

        Raises:
            NonExistentNodeError: If either value is not in the graph.
            NoPathError: If ``end`` cannot be reached from ``start``.
        """
        return shortest_path(self, start, end)

    def get_node(self, value: Hashable) -> Optional[Node]:
        """Returns the handle for ``value``, or None if it is not in the graph."""
        return self._store.get(value)

    def neighbors(self, value: Hashable) -> Iterator[Hashable]:
        """
        Returns an iterator over the values adjacent to ``value``.

        Raises:
            NonExistentNodeError: If the node does not exist.
        """
        return iter(self._store[value].adjacents)

    def has_edge(self, first: Hashable, second: Hashable) -> bool:
        node = self._store.get(first)
        return node is not None and second in node.adjacents

    def get_all_nodes(self) -> Iterator[Hashable]:
        """Returns an iterator over all node values in the graph."""
        return iter(self._store)

    def get_all_edges(self) -> Iterator[Tuple[Hashable, Hashable]]:
        """Yields every undirected edge once, as a pair of values."""
        seen: Set[Hashable] = set()
        for node in self._store.nodes():
            for neighbour in node.adjacents:
                if neighbour not in seen:
                    yield node.value, neighbour
            seen.add(node.value)

    def get_nodes_count(self) -> int:
        """Returns the number of nodes in the graph."""
        return len(self._store)

    def get_edges_count(self) -> int:
        """Returns the number of undirected edges in the graph."""
        ends = 0
        for node in self._store.nodes():
            ends += len(node.adjacents)
            if node.value in node.adjacents:
                ends += 1  # self-loop
        return ends // 2

    def __contains__(self, value: Hashable) -> bool:
        return value in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._store)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adjacency() == other._adjacency()

    __hash__ = None  # type: ignore[assignment]

    def _adjacency(self) -> Dict[Hashable, Set[Hashable]]:
        return {node.value: node.adjacents for node in self._store.nodes()}

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.get_nodes_count()}, edges={self.get_edges_count()})"
