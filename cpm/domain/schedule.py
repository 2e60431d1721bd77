from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from cpm.domain.graph import ActivityGraph


@dataclass(frozen=True)
class TimeWindow:
    """Earliest/latest start and finish of one activity."""

    label: str
    duration: int
    early_start: int
    early_finish: int
    late_start: int
    late_finish: int

    @property
    def total_float(self) -> int:
        """Scheduling flexibility (LS - ES); zero marks a critical activity."""
        return self.late_start - self.early_start

    @property
    def is_critical(self) -> bool:
        return self.total_float == 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "es": self.early_start,
            "ef": self.early_finish,
            "ls": self.late_start,
            "lf": self.late_finish,
            "float": self.total_float,
        }


@dataclass(frozen=True, eq=False)
class Schedule:
    """
    Result of one CPM run.

    Holds the graph that was scheduled, the topological order that drove the
    passes, the time window of every activity and the critical path analysis.
    Nothing here is mutated after the run.
    """

    graph: ActivityGraph
    order: Tuple[str, ...]
    windows: Mapping[str, TimeWindow]
    project_duration: int
    critical_activities: Tuple[str, ...]
    critical_edges: Tuple[Tuple[str, str], ...]
    critical_path: Tuple[str, ...]

    def __post_init__(self):
        # Freeze the mapping handed in by the calculator
        if not isinstance(self.windows, MappingProxyType):
            object.__setattr__(self, "windows", MappingProxyType(dict(self.windows)))

    def window(self, label: str) -> TimeWindow:
        return self.windows[label]

    def total_float(self, label: str) -> int:
        return self.windows[label].total_float

    def is_critical(self, label: str) -> bool:
        return self.windows[label].is_critical

    def rows(self) -> List[TimeWindow]:
        """Time windows in activity index order."""
        return [self.windows[label] for label in self.graph.labels]

    def __len__(self) -> int:
        return len(self.graph)
