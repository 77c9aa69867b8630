import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Deque, Hashable, List, Optional, Tuple

from .exceptions import NonExistentNodeError, NoPathError

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


class PathErrorKind(Enum):
    NON_EXISTENT_NODE = 1
    NO_PATH = 2


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a shortest-path search.

    On success ``path`` holds the values from start to end and ``error`` is None.
    On failure ``path`` is empty and ``error`` says why; ``missing`` lists the
    values that were not found in the graph.
    """
    start: Hashable
    end: Hashable
    path: List[Hashable] = field(default_factory=list)
    error: Optional[PathErrorKind] = None
    missing: Tuple[Hashable, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[Hashable]:
        """
        Returns the path, raising the exception that matches ``error`` if the
        search failed.
        """
        if self.error is PathErrorKind.NON_EXISTENT_NODE:
            raise NonExistentNodeError(*self.missing)
        if self.error is PathErrorKind.NO_PATH:
            raise NoPathError(self.start, self.end)
        return list(self.path)


def find_shortest_path(graph: "Graph", start: Hashable, end: Hashable) -> PathResult:
    """
    Breadth-first search for a path with the fewest edges from start to end.

    The queue holds partial paths rather than single nodes. Each node is marked
    the moment a path ending in it is enqueued, so no node is expanded twice and
    the search terminates on graphs with cycles. Markers are reset first, since
    they persist on the nodes between calls.

    Args:
        graph: The graph to search.
        start: The value the path starts from.
        end: The value the path must reach.

    Returns:
        A PathResult. Missing endpoints and unreachable targets are reported
        through ``PathResult.error`` instead of being raised.
    """
    missing = tuple(value for value in (start, end) if value not in graph)
    if missing:
        return PathResult(start, end, error=PathErrorKind.NON_EXISTENT_NODE, missing=missing)

    if start == end:
        return PathResult(start, end, path=[start])

    logger.debug("Searching for shortest path from %s to %s", start, end)
    graph.unmark_all()
    graph.get_node(start).marked = True

    queue: Deque[List[Hashable]] = deque()
    queue.append([start])

    while queue:
        partial_path = queue.popleft()
        last = graph.get_node(partial_path[-1])

        for neighbour_value in last.adjacents:
            neighbour = graph.get_node(neighbour_value)
            if neighbour.marked:
                continue
            neighbour.marked = True

            extended_path = partial_path + [neighbour_value]
            if neighbour_value == end:
                logger.debug("Found path of %d edges: %s", len(extended_path) - 1, extended_path)
                return PathResult(start, end, path=extended_path)
            queue.append(extended_path)

    logger.debug("Exhausted search space, no path from %s to %s", start, end)
    return PathResult(start, end, error=PathErrorKind.NO_PATH)


def shortest_path(graph: "Graph", start: Hashable, end: Hashable) -> List[Hashable]:
    """
    Finds a path with the fewest edges from start to end.

    If several shortest paths exist, any one of them may be returned.
    A path from a node to itself is just that node.

    Raises:
        NonExistentNodeError: If start or end is not in the graph.
        NoPathError: If end is not reachable from start.
    """
    return find_shortest_path(graph, start, end).unwrap()
