import matplotlib

matplotlib.use("Agg")

import pytest

from util import Arc, Graph


def _five_node_graph(is_directed):
    """0-1, 0-2, 1-3, 2-4, 3-4 (a cycle through every node)."""
    graph = Graph(num_nodes=5, is_directed=is_directed)
    n = graph.nodes
    for source, target in [(0, 1), (0, 2), (1, 3), (2, 4), (3, 4)]:
        graph.add(Arc(n[source], n[target], weight=source + target))
    return graph


@pytest.fixture
def undirected_graph():
    return _five_node_graph(is_directed=False)


@pytest.fixture
def directed_graph():
    return _five_node_graph(is_directed=True)
