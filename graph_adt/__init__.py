from .graph import Graph
from .node import Node, NodeStore
from .algorithms import find_shortest_path, shortest_path, PathErrorKind, PathResult
from .exceptions import NonExistentNodeError, NoPathError

__all__ = [
    "Graph", "Node", "NodeStore",
    "find_shortest_path", "shortest_path", "PathErrorKind", "PathResult",
    "NonExistentNodeError", "NoPathError",
]
