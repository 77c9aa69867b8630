import logging
import os

import matplotlib

# Only open a window if asked to; otherwise render off-screen and save the figure.
if os.environ.get("GRAPH_ADT_SHOW_PLOT") != "1":
    matplotlib.use("Agg")

import matplotlib.pyplot as plt

from graph_adt import Graph, NoPathError
from graph_adt.visualize import draw_graph

logging.basicConfig(level=os.environ.get("GRAPH_ADT_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger("visualize_with_networkx")

# A 4-cycle A-B-C-D plus an isolated node E
g = Graph()
for value in ("A", "B", "C", "D", "E"):
    g.insert(value)
g.connect("A", "B")
g.connect("B", "C")
g.connect("C", "D")
g.connect("A", "D")

logger.info("Graph:\n%s", g.dump())

path = g.shortest_path("A", "C")
logger.info("Shortest path A -> C: %s", path)

try:
    g.shortest_path("A", "E")
except NoPathError as e:
    logger.info("%s", e)

draw_graph(g, highlight_path=path, title="Shortest path A -> C")
plt.tight_layout()

if os.environ.get("GRAPH_ADT_SHOW_PLOT") == "1":
    plt.show()
else:
    plot_file = os.environ.get("GRAPH_ADT_PLOT_FILE", "graph.png")
    plt.savefig(plot_file)
    logger.info("Saved figure to %s. Set GRAPH_ADT_SHOW_PLOT=1 to open a window instead.", plot_file)
