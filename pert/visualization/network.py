import logging

import networkx as nx
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

logger = logging.getLogger(__name__)


def _layered_layout(G):
    """Place tasks in columns by topological generation."""
    for layer, nodes in enumerate(nx.topological_generations(G)):
        for node in nodes:
            G.nodes[node]["layer"] = layer
    return nx.multipartite_layout(G, subset_key="layer")


def create_network_diagram(analysis, filename=None, show=True, layout="layered"):
    """
    Visualize the task network with critical tasks highlighted.

    Args:
        analysis: An analysed PERT instance
        filename: Optional filename to save the diagram
        show: Whether to display the diagram (default: True)
        layout: Network layout type ('layered', 'spring', 'dot', 'circular',
            'shell' or 'spectral')

    Returns:
        The matplotlib figure
    """
    graph = analysis.graph
    G = graph.to_networkx()

    # Create the figure
    fig = plt.figure(figsize=(12, 8))

    # Critical tasks in red, everything else in sky blue
    node_colors = ["red" if analysis.critical(u) else "skyblue" for u in G.nodes()]

    # Prepare edge attributes
    edge_colors = []
    edge_widths = []

    for u, v in G.edges():
        # An edge is on a critical path when it carries no slack
        is_critical_edge = (
            analysis.critical(u)
            and analysis.critical(v)
            and analysis.ef(u) == analysis.es(v)
        )
        if is_critical_edge:
            edge_colors.append("red")
            edge_widths.append(2.5)
        else:
            edge_colors.append("gray")
            edge_widths.append(1.0)

    # Choose layout algorithm
    if layout == "layered":
        pos = _layered_layout(G)
    elif layout == "spring":
        pos = nx.spring_layout(G, seed=42)
    elif layout == "dot":
        try:
            pos = nx.nx_agraph.graphviz_layout(G, prog="dot")
        except ImportError:
            logger.warning("Graphviz not available. Using layered layout instead.")
            pos = _layered_layout(G)
    elif layout == "circular":
        pos = nx.circular_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    elif layout == "spectral":
        pos = nx.spectral_layout(G)
    else:
        pos = _layered_layout(G)

    nx.draw_networkx_nodes(
        G,
        pos,
        node_color=node_colors,
        node_size=600,
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
        connectionstyle="arc3,rad=0.1",
    )

    # Label each task with its schedule
    bbox_props = dict(boxstyle="round,pad=0.3", fc="white", ec="gray", alpha=0.8)
    for u in G.nodes():
        x, y = pos[u]
        label = (
            f"{graph.label(u)} (d={analysis.ef(u) - analysis.es(u)})\n"
            f"ES {analysis.es(u)} / EF {analysis.ef(u)}\n"
            f"LS {analysis.ls(u)} / LF {analysis.lf(u)}"
        )
        plt.text(
            x,
            y - 0.02,
            label,
            horizontalalignment="center",
            verticalalignment="top",
            bbox=bbox_props,
            fontsize=8,
        )

    # Create legend
    legend_elements = [
        Patch(facecolor="red", edgecolor="black", label="Critical Task"),
        Patch(facecolor="skyblue", edgecolor="black", label="Task with Slack"),
        Line2D([0], [0], color="red", lw=2.5, label="Critical Path"),
    ]

    plt.legend(handles=legend_elements, loc="best", fontsize=10)

    plt.title(
        f"PERT Network Diagram (completion time {analysis.critical_path()})",
        fontsize=14,
    )
    plt.axis("off")
    plt.tight_layout()

    # Save if filename provided
    if filename:
        plt.savefig(filename, dpi=300, bbox_inches="tight")
        logger.info("Network diagram saved to %s", filename)

    # Show if requested
    if show:
        plt.show()

    return fig
