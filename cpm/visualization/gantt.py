import logging

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

logger = logging.getLogger(__name__)


def create_gantt_chart(schedule, filename=None, show=True):
    """
    Create a Gantt chart of the early schedule with float shown after each bar.

    Args:
        schedule: The Schedule to draw
        filename: Optional filename to save the chart
        show: Whether to display the chart (default: True)

    Returns:
        The matplotlib figure
    """
    rows = schedule.rows()

    fig, ax = plt.subplots(figsize=(14, max(3, 0.6 * len(rows) + 2)))

    y = np.arange(len(rows))
    starts = np.array([w.early_start for w in rows])
    durations = np.array([w.duration for w in rows])
    floats = np.array([w.total_float for w in rows])
    colors = ["red" if w.is_critical else "blue" for w in rows]

    # Planned work from ES to EF
    ax.barh(y, durations, left=starts, color=colors, alpha=0.8, edgecolor="black")

    # Available float from EF to LF
    float_rows = floats > 0
    if float_rows.any():
        ax.barh(
            y[float_rows],
            floats[float_rows],
            left=(starts + durations)[float_rows],
            color="lightgray",
            alpha=0.6,
            hatch="///",
            edgecolor="gray",
        )

    # Mark zero-duration activities so they stay visible
    for i, w in enumerate(rows):
        if w.duration == 0:
            ax.plot(w.early_start, i, marker="D", color=colors[i], markersize=8)

    # Project end line
    ax.axvline(
        x=schedule.project_duration, color="black", linestyle="--", linewidth=1.5
    )

    ax.set_yticks(y)
    ax.set_yticklabels([w.label for w in rows])
    ax.invert_yaxis()  # First activity at the top
    ax.set_xlabel("Time")
    ax.set_xlim(0, max(schedule.project_duration, 1))
    ax.grid(axis="x", linestyle=":", alpha=0.5)

    legend_elements = [
        Patch(facecolor="red", edgecolor="black", label="Critical Activity"),
        Patch(facecolor="blue", edgecolor="black", label="Non-critical Activity"),
        Patch(facecolor="lightgray", edgecolor="gray", hatch="///", label="Float"),
    ]
    ax.legend(handles=legend_elements, loc="lower right")
    ax.set_title(f"CPM Schedule (project duration {schedule.project_duration})")

    plt.tight_layout()

    if filename:
        plt.savefig(filename, dpi=150, bbox_inches="tight")
        logger.info("Saved Gantt chart to %s", filename)

    if show:
        plt.show()

    return fig
