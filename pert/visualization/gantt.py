import logging

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

logger = logging.getLogger(__name__)


def create_gantt_chart(analysis, filename=None, show=True):
    """
    Create a Gantt chart of the PERT schedule.

    Each task is drawn from its earliest start to its earliest finish. Tasks
    with slack get a hatched extension up to their latest finish. Zero
    duration tasks are drawn as milestones.

    Args:
        analysis: An analysed PERT instance
        filename: Optional filename to save the chart
        show: Whether to display the chart (default: True)

    Returns:
        The matplotlib figure
    """
    graph = analysis.graph
    completion_time = analysis.critical_path()

    fig, ax_gantt = plt.subplots(figsize=(14, max(4, 0.5 * len(graph) + 2)))

    # Earliest tasks on top
    sorted_tasks = sorted(graph, key=lambda u: (analysis.es(u), u))

    for i, u in enumerate(sorted_tasks):
        start = analysis.es(u)
        duration = analysis.ef(u) - start
        color = "red" if analysis.critical(u) else "blue"

        if duration == 0:
            ax_gantt.plot(start, i, marker="D", color=color, markersize=8)
        else:
            ax_gantt.barh(i, duration, left=start, color=color, alpha=0.6)

        # Slack extension from EF to LF
        slack = analysis.slack(u)
        if slack > 0:
            ax_gantt.barh(
                i,
                slack,
                left=analysis.ef(u),
                color="lightgray",
                alpha=0.6,
                hatch="///",
            )

        ax_gantt.text(
            start + max(duration, 1) / 2,
            i,
            f"{graph.label(u)}",
            ha="center",
            va="center",
            color="black",
        )

    # Project completion line
    ax_gantt.axvline(x=completion_time, color="black", linestyle="--", linewidth=1)

    ax_gantt.set_yticks(range(len(sorted_tasks)))
    ax_gantt.set_yticklabels([f"Task {graph.label(u)}" for u in sorted_tasks])
    ax_gantt.invert_yaxis()
    ax_gantt.set_xlim(0, max(completion_time, 1) * 1.05)
    ax_gantt.set_xlabel("Time")
    ax_gantt.set_title(f"PERT Schedule (completion time {completion_time})")
    ax_gantt.grid(axis="x", alpha=0.3)

    legend_elements = [
        Patch(facecolor="red", alpha=0.6, label="Critical Task"),
        Patch(facecolor="blue", alpha=0.6, label="Task with Slack"),
        Patch(facecolor="lightgray", alpha=0.6, hatch="///", label="Slack"),
        Line2D(
            [0], [0], marker="D", color="w", markerfacecolor="gray", label="Milestone"
        ),
        Line2D([0], [0], color="black", linestyle="--", label="Project Completion"),
    ]
    ax_gantt.legend(handles=legend_elements, loc="lower right")

    plt.tight_layout()

    if filename:
        plt.savefig(filename, dpi=300, bbox_inches="tight")
        logger.info("Gantt chart saved to %s", filename)

    if show:
        plt.show()

    return fig
