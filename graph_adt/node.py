import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, Optional, Set

from .exceptions import NonExistentNodeError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """
    A single vertex. The value is both the identity and the payload of the node.

    Neighbours are kept as values rather than Node references, so a node never
    points at an object owned by another store.
    """
    value: Hashable
    adjacents: Set[Hashable] = field(default_factory=set)
    marked: bool = False

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class NodeStore:
    """
    Owns every Node of one graph, keyed by value.

    Values are unique: a second insert of the same value creates nothing.
    """

    def __init__(self) -> None:
        self._nodes: Dict[Hashable, Node] = {}

    def insert(self, value: Hashable) -> Optional[Node]:
        """
        Creates and stores an isolated, unmarked node for ``value``.

        Args:
            value: The value of the new node.

        Returns:
            The new node, or None if a node with this value already exists.
        """
        if value in self._nodes:
            logger.debug("Node %s already exists, nothing inserted", value)
            return None
        node = Node(value)
        self._nodes[value] = node
        logger.debug("Created node %s", value)
        return node

    def get(self, value: Hashable) -> Optional[Node]:
        return self._nodes.get(value)

    def __getitem__(self, value: Hashable) -> Node:
        try:
            return self._nodes[value]
        except KeyError:
            raise NonExistentNodeError(value) from None

    def owns(self, node: Node) -> bool:
        """Checks that ``node`` is the very object stored under its value."""
        return self._nodes.get(node.value) is node

    def nodes(self) -> Iterator[Node]:
        """Returns an iterator over the stored Node objects."""
        return iter(self._nodes.values())

    def clear(self) -> None:
        """Releases every owned node. Safe to call any number of times."""
        for node in self._nodes.values():
            node.adjacents.clear()
        self._nodes.clear()

    def __contains__(self, value: Hashable) -> bool:
        return value in self._nodes

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)
