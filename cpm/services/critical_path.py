import logging

logger = logging.getLogger(__name__)


def total_float(windows):
    """Return the total float (LS - ES) of every activity."""
    return {label: window.total_float for label, window in windows.items()}


def find_critical_activities(graph, windows):
    """Activities with zero float, in activity index order."""
    return [label for label in graph.labels if windows[label].total_float == 0]


def is_critical_edge(windows, pred, succ):
    """
    Check whether the edge pred -> succ lies on a critical chain.

    Both ends need zero float and the successor must start exactly when the
    predecessor finishes. Two critical activities joined by an edge are not
    always adjacent on the same critical chain.
    """
    u = windows[pred]
    v = windows[succ]
    return u.total_float == 0 and v.total_float == 0 and v.early_start == u.early_finish


def find_critical_edges(graph, windows):
    """All critical edges, sorted by (predecessor index, successor index)."""
    return [
        (pred, succ)
        for pred, succ in graph.edges()
        if is_critical_edge(windows, pred, succ)
    ]


def _choose_start(graph, windows):
    # Prefer a zero-float activity with no predecessors
    for label in graph.labels:
        if windows[label].total_float == 0 and not graph.has_predecessor(label):
            return label

    for label in graph.labels:
        if windows[label].total_float == 0:
            return label

    return None


def find_critical_path(graph, windows):
    """
    Find one critical path through the network.

    Starts at the lowest-index zero-float activity without predecessors and
    follows critical edges, always taking the lowest-index successor. When
    several critical paths exist only this one is reported.

    Args:
        graph: The ActivityGraph that was scheduled
        windows: Time windows keyed by label

    Returns:
        list: Labels along the path, empty if no activity has zero float
    """
    start = _choose_start(graph, windows)
    if start is None:
        logger.debug("No zero-float activity, critical path is empty")
        return []

    path = [start]
    current = start
    while True:
        following = None
        for succ in graph.ordered_successors(current):
            if is_critical_edge(windows, current, succ):
                following = succ
                break

        if following is None:
            break

        path.append(following)
        current = following

    logger.debug("Critical path: %s", " -> ".join(path))
    return path
