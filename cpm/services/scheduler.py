import logging

from cpm.domain.activity import Activity
from cpm.domain.errors import (
    DuplicateLabelError,
    PredecessorParseError,
    UnknownLabelError,
)
from cpm.domain.graph import ActivityGraph
from cpm.domain.schedule import Schedule
from cpm.services.critical_path import (
    find_critical_activities,
    find_critical_edges,
    find_critical_path,
)
from cpm.services.time_windows import calculate_time_windows
from cpm.services.topological_order import require_topological_order
from cpm.utils.parsing import NO_PREDECESSORS, parse_predecessors

logger = logging.getLogger(__name__)


def compute_schedule(activities, edges=()):
    """
    Run the full CPM pipeline: graph, ordering, both passes, critical path.

    Args:
        activities: Ordered Activity objects or (label, duration) pairs
        edges: (predecessor_label, successor_label) pairs

    Returns:
        Schedule: The computed schedule

    Raises:
        UnknownLabelError: If an edge references an unknown activity
        CyclePresentError: If the precedence relation has a cycle
    """
    graph = ActivityGraph(activities, edges)
    return schedule_graph(graph)


def schedule_graph(graph):
    """Schedule an already built ActivityGraph."""
    order = require_topological_order(graph)
    windows, duration = calculate_time_windows(graph, order)

    critical_activities = find_critical_activities(graph, windows)
    critical_edges = find_critical_edges(graph, windows)
    critical_path = find_critical_path(graph, windows)

    logger.info(
        "Scheduled %d activities, %d critical", len(graph), len(critical_activities)
    )

    return Schedule(
        graph=graph,
        order=tuple(order),
        windows=windows,
        project_duration=duration,
        critical_activities=tuple(critical_activities),
        critical_edges=tuple(critical_edges),
        critical_path=tuple(critical_path),
    )


class CPMScheduler:
    """
    Collects activities and precedence constraints and computes the schedule.

    The scheduler only accumulates inputs; every call to schedule() builds a
    fresh graph and runs the pipeline from scratch.
    """

    def __init__(self, no_predecessor_marker=NO_PREDECESSORS):
        self.no_predecessor_marker = no_predecessor_marker
        self.activities = []  # Activity objects in input order
        self.dependencies = []  # (predecessor, successor) label pairs
        self._pending_lines = {}  # Predecessor lines resolved at build time

    def add_activity(self, label, duration, predecessors=None):
        """
        Add an activity to the project.

        Args:
            label: Unique activity label
            duration: Duration in time units (integer >= 0)
            predecessors: List of labels, or a line such as "A,B" or "-"

        Returns:
            self: For method chaining
        """
        activity = Activity(label, duration)
        if any(a.label == label for a in self.activities):
            raise DuplicateLabelError(label)
        self.activities.append(activity)

        if isinstance(predecessors, str):
            # Labels may refer to activities that are added later
            self._pending_lines[label] = predecessors
        elif predecessors:
            for pred in predecessors:
                self.add_dependency(pred, label)

        return self

    def add_dependency(self, predecessor, successor):
        """Record that predecessor must finish before successor starts."""
        edge = (predecessor, successor)
        if edge not in self.dependencies:
            self.dependencies.append(edge)
        return self

    def _resolved_edges(self):
        edges = list(self.dependencies)
        labels = [a.label for a in self.activities]
        for label, line in self._pending_lines.items():
            result = parse_predecessors(line, labels, self.no_predecessor_marker)
            if result.blank:
                # Same as the marker: no predecessors
                continue
            missing = [token for token in result.unknown if token]
            if missing:
                raise UnknownLabelError(missing[0], referenced_by=label)
            if result.unknown:
                # Only empty tokens, e.g. "A,,B"
                raise PredecessorParseError(line)
            for pred in result.predecessors:
                if (pred, label) not in edges:
                    edges.append((pred, label))
        return edges

    def build_graph(self):
        """
        Build the activity graph from the collected inputs.

        Raises:
            UnknownLabelError: If a dependency or predecessor line names a
                label that is not an activity
            PredecessorParseError: If a predecessor line has empty entries
        """
        return ActivityGraph(self.activities, self._resolved_edges())

    def schedule(self):
        """Run the CPM algorithm and return the resulting Schedule."""
        return schedule_graph(self.build_graph())
