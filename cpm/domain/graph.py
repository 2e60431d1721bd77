import logging
from typing import Dict, FrozenSet, Iterable, Iterator, List, Tuple

import networkx as nx

from cpm.domain.activity import Activity
from cpm.domain.errors import DuplicateLabelError, UnknownLabelError

logger = logging.getLogger(__name__)


class ActivityGraph:
    """
    The precedence network of a project (activity-on-node).

    Activities are kept in a dense, stable-indexed list (their input order) and
    the precedence relation is stored as a networkx DiGraph keyed by label. An
    edge (p, i) means that activity p must finish before activity i can start.

    The graph is fixed once constructed; scheduling stages only read from it.
    """

    def __init__(
        self,
        activities: Iterable,
        edges: Iterable[Tuple[str, str]] = (),
    ):
        """
        Build the activity graph.

        Args:
            activities: Ordered Activity objects or (label, duration) pairs
            edges: (predecessor_label, successor_label) pairs

        Raises:
            DuplicateLabelError: If a label appears more than once
            UnknownLabelError: If an edge references a label not in activities
        """
        ordered = [Activity.coerce(a) for a in activities]

        index = {}
        for i, activity in enumerate(ordered):
            if activity.label in index:
                raise DuplicateLabelError(activity.label)
            index[activity.label] = i

        # Build into a local graph so a failure leaves nothing behind
        G = nx.DiGraph()
        for i, activity in enumerate(ordered):
            G.add_node(activity.label, index=i, activity=activity)

        for pred, succ in edges:
            if pred not in index:
                raise UnknownLabelError(pred, referenced_by=succ)
            if succ not in index:
                raise UnknownLabelError(succ, referenced_by=pred)
            G.add_edge(pred, succ)

        self._activities = tuple(ordered)
        self._index = index
        self._graph = nx.freeze(G)

        logger.debug(
            "Built activity graph with %d activities and %d edges",
            G.number_of_nodes(),
            G.number_of_edges(),
        )

    # Lookup

    @property
    def activities(self) -> Tuple[Activity, ...]:
        """Activities in index (input) order."""
        return self._activities

    @property
    def labels(self) -> List[str]:
        """Activity labels in index order."""
        return [a.label for a in self._activities]

    @property
    def digraph(self) -> nx.DiGraph:
        """Read-only networkx view of the precedence relation."""
        return self._graph

    def index_of(self, label: str) -> int:
        """Return the stable index of an activity."""
        try:
            return self._index[label]
        except KeyError:
            raise UnknownLabelError(label)

    def activity(self, label: str) -> Activity:
        return self._activities[self.index_of(label)]

    def duration(self, label: str) -> int:
        return self.activity(label).duration

    # Precedence queries

    def predecessors(self, label: str) -> FrozenSet[str]:
        """Activities with an edge into the given activity."""
        self.index_of(label)
        return frozenset(self._graph.predecessors(label))

    def successors(self, label: str) -> FrozenSet[str]:
        """Activities the given activity has an edge into."""
        self.index_of(label)
        return frozenset(self._graph.successors(label))

    def ordered_predecessors(self, label: str) -> List[str]:
        """Predecessors sorted by activity index."""
        return sorted(self.predecessors(label), key=self._index.__getitem__)

    def ordered_successors(self, label: str) -> List[str]:
        """Successors sorted by activity index."""
        return sorted(self.successors(label), key=self._index.__getitem__)

    def has_predecessor(self, label: str) -> bool:
        self.index_of(label)
        return self._graph.in_degree(label) > 0

    def has_successor(self, label: str) -> bool:
        self.index_of(label)
        return self._graph.out_degree(label) > 0

    def in_degrees(self) -> Dict[str, int]:
        """Number of incoming edges per activity."""
        return {label: self._graph.in_degree(label) for label in self.labels}

    def sources(self) -> List[str]:
        """Activities without predecessors, in index order."""
        return [label for label in self.labels if not self.has_predecessor(label)]

    def sinks(self) -> List[str]:
        """Activities without successors, in index order."""
        return [label for label in self.labels if not self.has_successor(label)]

    def edges(self) -> List[Tuple[str, str]]:
        """All precedence edges sorted by (predecessor index, successor index)."""
        return sorted(
            self._graph.edges(),
            key=lambda e: (self._index[e[0]], self._index[e[1]]),
        )

    def adjacency_matrix(self) -> List[List[int]]:
        """0/1 adjacency matrix in index order (row = predecessor)."""
        n = len(self._activities)
        matrix = [[0] * n for _ in range(n)]
        for pred, succ in self._graph.edges():
            matrix[self._index[pred]][self._index[succ]] = 1
        return matrix

    # Container protocol

    def __len__(self) -> int:
        return len(self._activities)

    def __contains__(self, label) -> bool:
        return label in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __repr__(self) -> str:
        return (
            f"ActivityGraph(activities={len(self)}, "
            f"edges={self._graph.number_of_edges()})"
        )
