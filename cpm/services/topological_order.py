import logging
from collections import deque

from cpm.domain.errors import CyclePresentError

logger = logging.getLogger(__name__)


def topological_order(graph):
    """
    Order activities so that every predecessor comes before its successors.

    Uses Kahn's algorithm with a FIFO queue. Activities that become free at
    the same time are processed in activity index order, which keeps the
    result (and the critical path picked later) deterministic.

    Args:
        graph: The ActivityGraph to order

    Returns:
        tuple: (order, ok) where order is a list of labels and ok is False when
        fewer than all activities could be ordered (a cycle exists)
    """
    in_degree = graph.in_degrees()

    # Seed with every activity that has no incoming edges
    queue = deque(label for label in graph.labels if in_degree[label] == 0)

    order = []
    while queue:
        label = queue.popleft()
        order.append(label)

        for succ in graph.ordered_successors(label):
            in_degree[succ] -= 1
            if in_degree[succ] == 0:
                queue.append(succ)

    ok = len(order) == len(graph)
    if not ok:
        logger.debug(
            "Topological ordering stopped after %d of %d activities",
            len(order),
            len(graph),
        )
    return order, ok


def require_topological_order(graph):
    """
    Return the topological order of the graph or raise if it has a cycle.

    Raises:
        CyclePresentError: If not every activity could be ordered
    """
    order, ok = topological_order(graph)
    if not ok:
        placed = set(order)
        unordered = [label for label in graph.labels if label not in placed]
        raise CyclePresentError(unordered)
    return order
