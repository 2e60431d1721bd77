import logging

from cpm.domain.schedule import TimeWindow

logger = logging.getLogger(__name__)


def forward_pass(graph, order):
    """
    Calculate early start and early finish times.

    Args:
        graph: The ActivityGraph being scheduled
        order: A complete topological order of the graph's labels

    Returns:
        tuple: (early_start, early_finish) dictionaries keyed by label
    """
    early_start = {}
    early_finish = {}

    for label in order:
        # Start activities begin at time zero
        start = 0
        for pred in graph.predecessors(label):
            if early_finish[pred] > start:
                start = early_finish[pred]

        early_start[label] = start
        early_finish[label] = start + graph.duration(label)

    return early_start, early_finish


def project_duration(early_finish):
    """Overall project duration: the latest early finish (0 when empty)."""
    return max(early_finish.values(), default=0)


def backward_pass(graph, order, duration):
    """
    Calculate late start and late finish times.

    Activities without successors are anchored to the project duration, even
    when the network has several disconnected end activities.

    Args:
        graph: The ActivityGraph being scheduled
        order: The topological order used for the forward pass
        duration: Project duration from the forward pass

    Returns:
        tuple: (late_start, late_finish) dictionaries keyed by label
    """
    late_start = {}
    late_finish = {}

    for label in reversed(order):
        successors = graph.successors(label)

        if not successors:  # End activity
            finish = duration
        else:
            # Successors were visited earlier in reverse order
            finish = min(late_start[succ] for succ in successors)

        late_finish[label] = finish
        late_start[label] = finish - graph.duration(label)

    return late_start, late_finish


def calculate_time_windows(graph, order):
    """
    Run both passes and combine the results into time windows.

    Args:
        graph: The ActivityGraph being scheduled
        order: A complete topological order (see require_topological_order)

    Returns:
        tuple: (windows, project_duration) where windows maps label to TimeWindow
    """
    early_start, early_finish = forward_pass(graph, order)
    duration = project_duration(early_finish)
    late_start, late_finish = backward_pass(graph, order, duration)

    windows = {}
    for label in graph.labels:
        windows[label] = TimeWindow(
            label=label,
            duration=graph.duration(label),
            early_start=early_start[label],
            early_finish=early_finish[label],
            late_start=late_start[label],
            late_finish=late_finish[label],
        )

    logger.info("Project duration: %d", duration)
    return windows, duration
