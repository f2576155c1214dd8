import argparse
import sys
import time
import tracemalloc

from builder import GraphConfig, create_graph
from strategies import SearchStrategy
from util import Arc, ConfigurationError, FormatBytes


def parse_arc(text):
    """Parses 'SRC:DST' or 'SRC:DST:WEIGHT' (node indices) into a tuple."""
    parts = text.split(':')
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"Arc '{text}' must look like SRC:DST[:WEIGHT]")
    try:
        source, target = int(parts[0]), int(parts[1])
        weight = float(parts[2]) if len(parts) == 3 else 0.0
    except ValueError:
        raise argparse.ArgumentTypeError(f"Arc '{text}' has a non-numeric field") from None
    return source, target, weight


def build_parser():
    parser = argparse.ArgumentParser(description="Build a graph and run its search strategy")
    parser.add_argument('--nodes', type=int, default=15, help='Number of nodes (default: 15)')
    parser.add_argument('--directed', action='store_true', help='Make the graph directed')
    parser.add_argument('--strategy', default=SearchStrategy.BFS.value,
                        choices=[s.value for s in SearchStrategy], help='Search strategy (default: bfs)')
    parser.add_argument('--arc', dest='arcs', action='append', type=parse_arc, default=[],
                        metavar='SRC:DST[:WEIGHT]', help='Add an arc between node indices (repeatable)')
    parser.add_argument('--root', type=int, default=None, help='Index of the node the search starts from')
    parser.add_argument('--order', action='store_true', help='Print the visit order')
    parser.add_argument('--metrics', action='store_true', help='Print runtime and memory on stderr')
    parser.add_argument('--plot', action='store_true', help='Draw the graph with matplotlib')
    return parser


def _execute_with_metrics(run_fn):
    """Run a callable and collect runtime and peak tracemalloc bytes.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes)
    """
    tracemalloc.start()
    try:
        t0 = time.perf_counter()
        result = run_fn()
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    return result, dt, peak


def _node_at(graph, index):
    nodes = graph.nodes
    if not 0 <= index < len(nodes):
        raise ConfigurationError(f"Node index {index} out of range (graph has {len(nodes)} nodes)")
    return nodes[index]


def main(config, arcs=(), root=None, show_order=False, metrics=False, plot=False):
    """Builds the graph for ``config`` and runs its search.

    ``arcs`` holds (source_index, target_index, weight) tuples. Returns the
    visit order, or None when no search is bound.
    """
    graph = create_graph(config)
    for source, target, weight in arcs:
        graph.add(Arc(_node_at(graph, source), _node_at(graph, target), weight))

    root_node = _node_at(graph, root) if root is not None else None

    def run_fn():
        return graph.search_algorithm(root_node)

    order, runtime_s, peak_bytes = _execute_with_metrics(run_fn)

    if show_order and order is not None:
        print(" -> ".join(node.name for node in order))

    if metrics:
        visited = len(order) if order is not None else 0
        print(
            f"Metrics: strategy={config.search_strategy.value} nodes_visited={visited} "
            f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={FormatBytes(peak_bytes)}",
            file=sys.stderr,
        )

    if plot:
        import matplotlib.pyplot as plt
        from seegraph import draw_graph

        draw_graph(graph)
        plt.show()

    return order


def cli(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        # This config could also be loaded from a properties file or a service.
        config = GraphConfig(is_directed=args.directed, num_nodes=args.nodes,
                             search_strategy=args.strategy)
        main(config, arcs=args.arcs, root=args.root, show_order=args.order,
             metrics=args.metrics, plot=args.plot)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
