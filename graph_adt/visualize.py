"""
Bridges between graph_adt.Graph and networkx, plus a matplotlib drawing helper.
"""
from typing import Hashable, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from .graph import Graph


def to_networkx(graph: Graph) -> nx.Graph:
    """Converts ``graph`` into a networkx.Graph, isolated nodes included."""
    nx_graph = nx.Graph()
    nx_graph.add_nodes_from(graph.get_all_nodes())
    nx_graph.add_edges_from(graph.get_all_edges())
    return nx_graph


def from_networkx(nx_graph: nx.Graph) -> Graph:
    """
    Builds a Graph from any networkx graph.

    Edge direction, weights and attributes are dropped; parallel edges collapse
    into one.
    """
    graph = Graph()
    for node in nx_graph.nodes:
        graph.insert(node)
    for u, v in nx_graph.edges():
        graph.connect(u, v)
    return graph


def draw_graph(
    graph: Graph,
    ax: Optional[plt.Axes] = None,
    highlight_path: Optional[Sequence[Hashable]] = None,
    title: str = "Graph Visualization (networkx)",
) -> plt.Axes:
    """
    Draws ``graph`` with a circular layout.

    Args:
        graph: The graph to draw.
        ax: Axes to draw on. A new figure is created when omitted.
        highlight_path: Optional sequence of values, e.g. the result of
            shortest_path; its nodes and edges are drawn in a distinct colour.
        title: Title of the axes.

    Returns:
        The axes the graph was drawn on.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    nx_graph = to_networkx(graph)
    path = list(highlight_path or [])
    path_nodes = set(path)
    path_edges = {frozenset(pair) for pair in zip(path, path[1:])}

    node_color = ["orange" if node in path_nodes else "lightblue" for node in nx_graph.nodes]
    edge_color = ["red" if frozenset(edge) in path_edges else "gray" for edge in nx_graph.edges]

    nx.draw_circular(
        nx_graph,
        ax=ax,
        with_labels=True,
        node_color=node_color,
        edge_color=edge_color,
        node_size=800,
        font_size=10,
        font_weight="bold",
    )
    ax.set_title(title)
    return ax
