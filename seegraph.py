import math

import matplotlib.pyplot as plt


def circle_layout(nodes, radius=5.0):
    """Places nodes evenly on a circle, first node at the top. Keyed by node identity."""
    coords = {}
    count = len(nodes)
    for i, node in enumerate(nodes):
        angle = math.pi / 2 - 2 * math.pi * i / max(count, 1)
        coords[node] = (radius * math.cos(angle), radius * math.sin(angle))
    return coords


def draw_graph(graph, ax=None, title="Graph Visualization"):
    """Draws nodes, arcs and arc weights. Returns the Axes.

    Arcs whose endpoints are not nodes of the graph are skipped.
    """
    if ax is None:
        _fig, ax = plt.subplots(figsize=(10, 8))

    coords = circle_layout(graph.nodes)

    # Plot nodes
    for node, (x, y) in coords.items():
        ax.scatter(x, y, s=500, zorder=3, color='lightblue', edgecolor='darkblue', linewidth=2)

    # Draw all node names on top (after all circles are drawn)
    for node, (x, y) in coords.items():
        ax.text(x, y, node.name, fontsize=9, ha='center', va='center', color="black", fontweight='bold', zorder=5)

    for arc in graph.arcs:
        if arc.source not in coords or arc.target not in coords:
            continue
        x1, y1 = coords[arc.source]
        x2, y2 = coords[arc.target]

        if graph.is_directed:
            ax.annotate("", xy=(x1 + (x2 - x1) * 0.9, y1 + (y2 - y1) * 0.9), xytext=(x1, y1),
                        arrowprops=dict(arrowstyle='-|>', color='darkgray', linewidth=2, alpha=0.7),
                        zorder=1)
        else:
            ax.plot([x1, x2], [y1, y2], 'gray', linewidth=2, zorder=1, alpha=0.6)

        # weight label at mid-point
        weight = int(arc.weight) if float(arc.weight).is_integer() else arc.weight
        mid_x = (x1 + x2) / 2
        mid_y = (y1 + y2) / 2
        ax.text(mid_x, mid_y, str(weight), fontsize=10, color='blue',
                bbox=dict(boxstyle='round,pad=0.3', facecolor='white', edgecolor='blue', alpha=0.8),
                fontweight='bold', zorder=2)

    ax.set_title(title, fontsize=18, fontweight='bold', pad=20)
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3, linestyle='--')
    return ax
