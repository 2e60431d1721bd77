import logging

import networkx as nx
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

logger = logging.getLogger(__name__)


def _layered_layout(G):
    """Place activities in columns by topological generation."""
    for layer, nodes in enumerate(nx.topological_generations(G)):
        for node in nodes:
            G.nodes[node]["layer"] = layer
    return nx.multipartite_layout(G, subset_key="layer")


def create_network_diagram(schedule, filename=None, show=True, layout="layered"):
    """
    Visualize the activity network with the critical activities highlighted.

    Args:
        schedule: The Schedule to draw
        filename: Optional filename to save the diagram
        show: Whether to display the diagram (default: True)
        layout: Network layout type ('layered', 'spring', 'circular' or 'shell')

    Returns:
        The matplotlib figure
    """
    # Work on an unfrozen copy so layout attributes can be attached
    G = nx.DiGraph(schedule.graph.digraph)
    critical_edges = set(schedule.critical_edges)

    fig = plt.figure(figsize=(12, 8))

    # Prepare node attributes
    node_colors = []
    for node in G.nodes():
        if schedule.is_critical(node):
            node_colors.append("red")
        else:
            node_colors.append("skyblue")

    # Prepare edge attributes
    edge_colors = []
    edge_widths = []
    for u, v in G.edges():
        if (u, v) in critical_edges:
            edge_colors.append("red")
            edge_widths.append(2.5)
        else:
            edge_colors.append("gray")
            edge_widths.append(1.0)

    # Choose layout algorithm
    if len(G) == 0:
        pos = {}
    elif layout == "layered":
        pos = _layered_layout(G)
    elif layout == "spring":
        pos = nx.spring_layout(G, seed=42)
    elif layout == "circular":
        pos = nx.circular_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    else:
        logger.warning("Unknown layout '%s', using layered layout", layout)
        pos = _layered_layout(G)

    nx.draw_networkx_nodes(
        G,
        pos,
        node_color=node_colors,
        node_size=900,
        node_shape="o",
        edgecolors="black",
    )

    nx.draw_networkx_edges(
        G,
        pos,
        edge_color=edge_colors,
        width=edge_widths,
        arrowsize=15,
        arrowstyle="-|>",
        node_size=900,
    )

    # Node labels: activity, duration and its time window
    labels = {}
    for node in G.nodes():
        w = schedule.window(node)
        labels[node] = (
            f"{node} ({w.duration})\n"
            f"ES {w.early_start} | EF {w.early_finish}\n"
            f"LS {w.late_start} | LF {w.late_finish}"
        )

    bbox_props = dict(boxstyle="round,pad=0.3", fc="white", ec="gray", alpha=0.8)
    for node, label in labels.items():
        plt.text(
            pos[node][0],
            pos[node][1] - 0.08,
            label,
            horizontalalignment="center",
            verticalalignment="top",
            bbox=bbox_props,
            fontsize=8,
        )

    # Create legend
    legend_elements = [
        Patch(facecolor="red", edgecolor="black", label="Critical Activity"),
        Patch(facecolor="skyblue", edgecolor="black", label="Activity with Float"),
        Line2D([0], [0], color="red", lw=2.5, label="Critical Edge"),
        Line2D([0], [0], color="gray", lw=1, label="Precedence"),
    ]
    plt.legend(handles=legend_elements, loc="best", fontsize=10)

    path_text = " -> ".join(schedule.critical_path) or "none"
    plt.title(
        f"Project Network (duration {schedule.project_duration}, "
        f"critical path {path_text})",
        fontsize=14,
    )
    plt.axis("off")
    plt.tight_layout()

    # Save if filename provided
    if filename:
        plt.savefig(filename, dpi=150, bbox_inches="tight")
        logger.info("Saved network diagram to %s", filename)

    # Show if requested
    if show:
        plt.show()

    return fig
